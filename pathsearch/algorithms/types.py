"""Types and aliases shared by the search engines.

Defines the immutable ``Edge`` record yielded by weighted edge providers and
the callable aliases accepted by the engines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Hashable, Iterable, TypeVar, Union

# Nodes are opaque to the engines: they are only hashed and compared for equality.
T = TypeVar("T", bound=Hashable)

Cost = Union[int, float]


@dataclass(frozen=True)
class Edge(Generic[T]):
    """Outgoing directed edge of a node being expanded.

    Attributes:
        node: Endpoint (target node) of the edge.
        weight: Edge weight. Dijkstra expects non-negative weights; the SPFA
            engine also accepts negative ones.
    """

    node: T
    weight: Cost = 1


NeighborProvider = Callable[[T], Iterable[T]]
EdgeProvider = Callable[[T], Iterable[Edge[T]]]
TargetPredicate = Callable[[T], bool]
