"""Breadth-first search over implicit graphs.

The graph is given by a neighbor provider: for each node ``u`` it returns the
nodes reachable from ``u`` over one directed edge. Nodes often represent states
of a puzzle and edges the feasible steps, so the graph may be infinite as long
as neighbors are produced on demand.

A target predicate turns the traversal into a path search: the run stops as
soon as a target node is dequeued. Because BFS dequeues nodes in non-decreasing
distance order, that target has minimum distance among all targets.

Notes:
    The neighbor provider is called at most once per node. A search over an
    infinite graph returns only if a target is reachable.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, Optional, Tuple

from pathsearch.algorithms.common import (
    SearchStats,
    resolve_predicate,
    seed_sources,
)
from pathsearch.algorithms.result import PathResult
from pathsearch.algorithms.types import NeighborProvider, T, TargetPredicate


def find_path(
    source: T,
    neighbor_provider: NeighborProvider,
    target_predicate: TargetPredicate,
) -> Optional[PathResult[T]]:
    """Find a shortest path (in number of edges) from `source` to a target node.

    Args:
        source: The source node.
        neighbor_provider: Returns the neighbors of a node. The graph defined
            this way may be infinite.
        target_predicate: Returns True for target node(s). For a single target
            ``t`` use ``lambda n: n == t``.

    Returns:
        PathResult of the closest target, or None if no target is reachable.
    """
    return find_path_from([source], neighbor_provider, target_predicate)


def find_path_from(
    sources: Iterable[T],
    neighbor_provider: NeighborProvider,
    target_predicate: TargetPredicate,
) -> Optional[PathResult[T]]:
    """Find a shortest path from any of `sources` to a target node.

    Returns:
        PathResult of the closest target, or None if no target is reachable.
    """
    _, stats = _search(sources, neighbor_provider, target_predicate)
    return stats.stopped_at


def run(
    source: T,
    neighbor_provider: NeighborProvider,
    target_predicate: Optional[TargetPredicate] = None,
) -> Dict[T, PathResult[T]]:
    """Run BFS from a single source node.

    Without a target predicate, all nodes reachable from `source` are visited.

    Returns:
        Mapping of every discovered node to its PathResult.
    """
    return run_from([source], neighbor_provider, target_predicate)


def run_from(
    sources: Iterable[T],
    neighbor_provider: NeighborProvider,
    target_predicate: Optional[TargetPredicate] = None,
) -> Dict[T, PathResult[T]]:
    """Run BFS from one or more source nodes.

    All sources start at distance 0 and are searched as a joint frontier.

    Args:
        sources: The source nodes.
        neighbor_provider: Returns the neighbors of a node.
        target_predicate: Returns True for target node(s). The search stops
            when the first target is dequeued. None searches exhaustively.

    Returns:
        Mapping of every node discovered during the search to its PathResult.
        Nodes discovered but not yet expanded when a target stopped the search
        are included.
    """
    results, _ = _search(sources, neighbor_provider, target_predicate)
    return results


def _search(
    sources: Iterable[T],
    neighbor_provider: NeighborProvider,
    target_predicate: Optional[TargetPredicate],
) -> Tuple[Dict[T, PathResult[T]], SearchStats]:
    """Run the BFS loop; `stats.stopped_at` holds the target that ended it."""
    target_predicate = resolve_predicate(target_predicate)
    results = seed_sources(sources, target_predicate)
    queue: Deque[T] = deque(results)

    stats = SearchStats("bfs")
    stats.start(results)

    while queue:
        node = queue.popleft()
        result = results[node]
        if result.is_target:
            stats.stopped_at = result
            break

        stats.record_expansion(results)
        for neighbor in neighbor_provider(node):
            if neighbor not in results:
                results[neighbor] = PathResult(
                    neighbor, result.dist + 1, target_predicate(neighbor), result
                )
                queue.append(neighbor)

    stats.finish(results)
    return results, stats
