"""Character-grid adapters for the search engines.

A grid is a sequence of equal-length strings; a cell is a ``(row, col)``
tuple. These helpers turn a grid into BFS neighbor providers or weighted edge
providers over 4-connected cells. They do not define a grid type of their own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, List, Sequence, Tuple, Union

from pathsearch.algorithms.types import Cost, Edge

Cell = Tuple[int, int]
Grid = Sequence[str]

# Row/column offsets of the 4-neighborhood, in reading order
_OFFSETS: Tuple[Cell, ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))


def read_char_grid(path: Union[str, Path]) -> Tuple[str, ...]:
    """Read a text file as a character grid.

    Trailing whitespace of every line and blank lines at the end of the file
    are ignored.

    Args:
        path: Path of the text file.

    Returns:
        Tuple of rows.

    Raises:
        ValueError: If the file is empty or the rows differ in length.
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    rows: List[str] = [line.rstrip() for line in lines]
    while rows and not rows[-1]:
        rows.pop()

    if not rows:
        raise ValueError(f"Grid file '{path}' is empty")
    width = len(rows[0])
    for idx, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Grid row {idx} has length {len(row)}, expected {width}"
            )
    return tuple(rows)


def grid_cells(grid: Grid) -> Iterator[Tuple[Cell, str]]:
    """Yield every ``((row, col), value)`` pair of the grid in reading order."""
    for row, line in enumerate(grid):
        for col, value in enumerate(line):
            yield (row, col), value


def grid_neighbors(grid: Grid, cell: Cell) -> Iterator[Cell]:
    """Yield the 4-connected neighbors of `cell` that lie inside the grid."""
    row_count = len(grid)
    col_count = len(grid[0]) if row_count else 0
    row, col = cell
    for d_row, d_col in _OFFSETS:
        n_row, n_col = row + d_row, col + d_col
        if 0 <= n_row < row_count and 0 <= n_col < col_count:
            yield n_row, n_col


def grid_neighbor_provider(
    grid: Grid, passable: Union[str, Callable[[str], bool]] = "."
) -> Callable[[Cell], List[Cell]]:
    """Create a BFS neighbor provider over the passable cells of a grid.

    Args:
        grid: The character grid.
        passable: Either the characters of passable cells (e.g. ``"."``) or a
            predicate on the cell character.

    Returns:
        Callable mapping a cell to its passable 4-connected neighbors.
    """
    is_passable = passable.__contains__ if isinstance(passable, str) else passable

    def neighbors(cell: Cell) -> List[Cell]:
        return [
            n for n in grid_neighbors(grid, cell) if is_passable(grid[n[0]][n[1]])
        ]

    return neighbors


def grid_edge_provider(
    grid: Grid, cost: Callable[[str], Cost]
) -> Callable[[Cell], List[Edge[Cell]]]:
    """Create a weighted edge provider over all cells of a grid.

    The weight of a step is the cost of entering the destination cell.

    Args:
        grid: The character grid.
        cost: Maps the destination cell character to the step cost.

    Returns:
        Callable mapping a cell to Edge records towards its 4-connected
        neighbors.
    """

    def edges(cell: Cell) -> List[Edge[Cell]]:
        return [
            Edge(n, cost(grid[n[0]][n[1]])) for n in grid_neighbors(grid, cell)
        ]

    return edges
