"""Dijkstra's algorithm over implicit weighted graphs.

The graph is given by an edge provider: for each node ``u`` it returns the
outgoing edges of ``u`` as ``Edge(node, weight)`` records. The provider is
called exactly once per settled node, when the search advances from it, so
edges can be generated on the fly and the graph may be infinite.

Notes:
    Only non-negative weights are supported; this is not checked. Use
    ``pathsearch.algorithms.spfa`` when negative weights are needed.

    When a target predicate is given, the run stops once the first target is
    settled. Settlement order is non-decreasing in distance, so that target is
    optimal among all targets. The target node itself is not expanded.

    Improved tentative distances push a new heap entry instead of updating the
    old one; outdated entries are skipped when popped.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterable, List, Optional, Set, Tuple

from pathsearch.algorithms.common import (
    SearchStats,
    resolve_predicate,
    seed_sources,
)
from pathsearch.algorithms.result import PathResult
from pathsearch.algorithms.types import Cost, EdgeProvider, T, TargetPredicate


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
            qualify, the first settled one is returned; no other target is
            closer.

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
    _, stats = _search(sources, edge_provider, target_predicate)
    return stats.stopped_at


def run(
    source: T,
    edge_provider: EdgeProvider,
    target_predicate: Optional[TargetPredicate] = None,
) -> Dict[T, PathResult[T]]:
    """Run Dijkstra from a single source node.

    Returns:
        Mapping of every discovered node to its PathResult.
    """
    return run_from([source], edge_provider, target_predicate)


def run_from(
    sources: Iterable[T],
    edge_provider: EdgeProvider,
    target_predicate: Optional[TargetPredicate] = None,
) -> Dict[T, PathResult[T]]:
    """Run Dijkstra from one or more source nodes.

    Args:
        sources: The source nodes, all seeded at distance 0.
        edge_provider: Returns the outgoing edges of a node as Edge records.
            Weights must be non-negative.
        target_predicate: Returns True for target node(s). None (or a predicate
            accepting no node) searches every reachable node.

    Returns:
        Mapping of every node discovered during the search to its PathResult.
        Distances of settled nodes are final; nodes still in the frontier when
        a target stopped the search carry tentative distances.
    """
    results, _ = _search(sources, edge_provider, target_predicate)
    return results


def _search(
    sources: Iterable[T],
    edge_provider: EdgeProvider,
    target_predicate: Optional[TargetPredicate],
) -> Tuple[Dict[T, PathResult[T]], SearchStats]:
    """Run the Dijkstra loop; `stats.stopped_at` holds the settled target."""
    target_predicate = resolve_predicate(target_predicate)
    results = seed_sources(sources, target_predicate)

    # (dist, seq, node): seq breaks distance ties so nodes are never compared
    seq = count()
    min_pq: List[Tuple[Cost, int, T]] = [(0, next(seq), node) for node in results]
    settled: Set[T] = set()

    stats = SearchStats("dijkstra")
    stats.start(results)

    while min_pq:
        dist, _, node = heappop(min_pq)
        if node in settled:
            continue
        settled.add(node)

        result = results[node]
        if result.is_target:
            stats.stopped_at = result
            break

        stats.record_expansion(results)
        for edge in edge_provider(node):
            neighbor = edge.node
            new_dist = dist + edge.weight
            current = results.get(neighbor)
            if current is None or new_dist < current.dist:
                results[neighbor] = PathResult(
                    neighbor, new_dist, target_predicate(neighbor), result
                )
                heappush(min_pq, (new_dist, next(seq), neighbor))

    stats.finish(results)
    return results, stats
