"""Sample graphs shared by the engine tests."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest

from pathsearch.algorithms.types import Edge
from pathsearch.lib.grid import read_char_grid

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def simple_graph() -> Dict[str, List[str]]:
    return {
        "A": ["B", "C", "D"],
        "B": ["E"],
        "C": ["E"],
        "D": ["G"],
        "E": ["D", "F", "G"],
        "F": ["B", "G"],
    }


@pytest.fixture
def weighted_graph() -> Dict[str, List[Edge[str]]]:
    #        [10]      [1]      [1]
    #   A──────────►B──────►C──────►E
    #   │           ▲       ▲       ▲
    #   │[5]     [3]│    [9]│   [11]│
    #   └─────►D────┴───────┴───────┘
    return {
        "A": [Edge("B", 10), Edge("D", 5)],
        "B": [Edge("C", 1)],
        "C": [Edge("E", 1)],
        "D": [Edge("B", 3), Edge("C", 9), Edge("E", 11)],
    }


@pytest.fixture
def maze():
    # 10x12 maze, '#' is a wall and '.' an empty tile. The only wall-free route
    # from the top left to the bottom right corner takes 50 steps, while the
    # direct route down the first column crosses a single wall at (5, 0).
    return read_char_grid(DATA_DIR / "maze.txt")
