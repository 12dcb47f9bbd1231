"""Per-node search outcome shared by all engines.

``PathResult`` records the distance of a node found by a search run, whether
the node satisfied the target predicate, and a link to the result of its
predecessor. The node sequence from a source is rebuilt from those links on
first access and cached on the instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Generic, List, Optional, Tuple

from pathsearch.algorithms.types import Cost, T


@dataclass(frozen=True, eq=False)
class PathResult(Generic[T]):
    """Search result for a single node.

    Instances are created by the engines only. Equality is identity: two
    results are the same only if they are the same record of the same run.

    Attributes:
        node: The node this result describes.
        dist: Distance from the nearest source (number of edges for BFS, sum
            of edge weights for the weighted engines).
        is_target: Whether the node satisfied the target predicate.
        prev: Result of the predecessor node, or None for a source.
    """

    node: T
    dist: Cost
    is_target: bool
    prev: Optional[PathResult[T]] = field(default=None, repr=False)

    @cached_property
    def path(self) -> Tuple[T, ...]:
        """Return the nodes from a source to this node, both inclusive.

        Returns:
            Tuple of nodes, starting at a source node and ending at ``node``.
        """
        nodes: List[T] = []
        result: Optional[PathResult[T]] = self
        while result is not None:
            nodes.append(result.node)
            result = result.prev
        nodes.reverse()
        return tuple(nodes)

    @property
    def source(self) -> T:
        """Return the source node the path starts from."""
        return self.path[0]
