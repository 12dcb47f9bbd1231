"""pathsearch: shortest paths and reachability over implicit graphs.

The caller describes the graph with a function producing the neighbors (or
weighted edges) of a node and, optionally, a predicate for target nodes. The
graph may be infinite; nodes can be any hashable values, e.g. puzzle states
or grid cells.

Engines:
    bfs - Unweighted shortest paths (breadth-first search)
    dijkstra - Shortest paths with non-negative weights
    spfa - Shortest paths with arbitrary weights, no negative cycles

Each engine module provides find_path(), find_path_from(), run() and
run_from(). Results are PathResult records with a lazily built path.

Example:
    from pathsearch import bfs

    result = bfs.find_path(0, lambda n: (n + 1, 2 * n), lambda n: n == 128)
    result.dist   # 8
    result.path   # (0, 1, 2, 4, 8, 16, 32, 64, 128)
"""

from __future__ import annotations

from pathsearch import logging
from pathsearch.algorithms import bfs, dijkstra, spfa
from pathsearch.algorithms.result import PathResult
from pathsearch.algorithms.types import Edge

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "bfs",
    "dijkstra",
    "spfa",
    "Edge",
    "PathResult",
    "logging",
]
