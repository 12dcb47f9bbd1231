"""Path-search engines over implicit graphs.

Each engine module (``bfs``, ``dijkstra``, ``spfa``) exposes the same entry
points: ``find_path``, ``find_path_from``, ``run`` and ``run_from``.
"""

from pathsearch.algorithms import bfs, dijkstra, spfa
from pathsearch.algorithms.result import PathResult
from pathsearch.algorithms.types import Edge

__all__ = ["bfs", "dijkstra", "spfa", "Edge", "PathResult"]
