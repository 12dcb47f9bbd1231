"""General shortest paths with negative edge weights (SPFA).

Implements the Shortest Path Faster Algorithm, a queue-based variant of
Bellman-Ford. The graph is given by an edge provider returning
``Edge(node, weight)`` records for each node; weights may be negative.

Notes:
    The graph must not contain a reachable directed cycle of negative total
    weight. Such input is not detected and the search does not terminate.

    A node is re-queued whenever its distance improves, so the edge provider
    can be called several times for the same node during one run.

    The target predicate only flags results. Without a settlement order an
    early target is not provably optimal, so the search always runs until the
    queue is empty, and a target predicate does not make it faster.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, Optional, Set

from pathsearch.algorithms.common import (
    SearchStats,
    best_target,
    resolve_predicate,
    seed_sources,
)
from pathsearch.algorithms.result import PathResult
from pathsearch.algorithms.types import EdgeProvider, T, TargetPredicate


def find_path(
    source: T,
    edge_provider: EdgeProvider,
    target_predicate: TargetPredicate,
) -> Optional[PathResult[T]]:
    """Find a shortest path from `source` to a target node.

    Args:
        source: The source node.
        edge_provider: Returns the outgoing edges of a node as Edge records.
        target_predicate: Returns True for target node(s). If several nodes
            qualify, the result of a closest one is returned.

    Returns:
        PathResult of the closest target, or None if no target is reachable.
    """
    return find_path_from([source], edge_provider, target_predicate)


def find_path_from(
    sources: Iterable[T],
    edge_provider: EdgeProvider,
    target_predicate: TargetPredicate,
) -> Optional[PathResult[T]]:
    """Find a shortest path from any of `sources` to a target node."""
    return best_target(run_from(sources, edge_provider, target_predicate))


def run(
    source: T,
    edge_provider: EdgeProvider,
    target_predicate: Optional[TargetPredicate] = None,
) -> Dict[T, PathResult[T]]:
    """Run SPFA from a single source node.

    Returns:
        Mapping of every node reachable from `source` to its PathResult.
    """
    return run_from([source], edge_provider, target_predicate)


def run_from(
    sources: Iterable[T],
    edge_provider: EdgeProvider,
    target_predicate: Optional[TargetPredicate] = None,
) -> Dict[T, PathResult[T]]:
    """Run SPFA from one or more source nodes.

    Args:
        sources: The source nodes, all seeded at distance 0.
        edge_provider: Returns the outgoing edges of a node as Edge records.
        target_predicate: Marks target node(s) in the results. It does not
            stop the search.

    Returns:
        Mapping of every node reachable from the sources to its PathResult,
        with final shortest distances.
    """
    target_predicate = resolve_predicate(target_predicate)
    results = seed_sources(sources, target_predicate)
    queue: Deque[T] = deque(results)
    queued: Set[T] = set(results)

    stats = SearchStats("spfa")
    stats.start(results)

    while queue:
        node = queue.popleft()
        queued.discard(node)
        result = results[node]

        stats.record_expansion(results)
        for edge in edge_provider(node):
            neighbor = edge.node
            new_dist = result.dist + edge.weight
            current = results.get(neighbor)
            if current is None or new_dist < current.dist:
                results[neighbor] = PathResult(
                    neighbor, new_dist, target_predicate(neighbor), result
                )
                if neighbor not in queued:
                    queue.append(neighbor)
                    queued.add(neighbor)

    stats.finish(results)
    return results
