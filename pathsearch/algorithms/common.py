"""Plumbing shared by the BFS, Dijkstra and SPFA engines.

Covers target-predicate defaults, seeding of the result map with source nodes,
selection of the reported target, and DEBUG progress accounting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from pathsearch.algorithms.result import PathResult
from pathsearch.algorithms.types import T, TargetPredicate
from pathsearch.config import SEARCH_CONFIG
from pathsearch.logging import get_logger

logger = get_logger(__name__)


def never(_node: Any) -> bool:
    """Target predicate that accepts no node (exhaustive search)."""
    return False


def resolve_predicate(target_predicate: Optional[TargetPredicate]) -> TargetPredicate:
    """Return `target_predicate`, or `never` if it is None."""
    return never if target_predicate is None else target_predicate


def seed_sources(
    sources: Iterable[T], target_predicate: TargetPredicate
) -> Dict[T, PathResult[T]]:
    """Create the initial result map with every source at distance 0.

    Repeated sources are seeded once; insertion order follows `sources`.

    Args:
        sources: Source nodes.
        target_predicate: Predicate evaluated once per source.

    Returns:
        Mapping from each distinct source to its root PathResult.
    """
    results: Dict[T, PathResult[T]] = {}
    for source in sources:
        if source not in results:
            results[source] = PathResult(source, 0, target_predicate(source), None)
    return results


def best_target(results: Dict[T, PathResult[T]]) -> Optional[PathResult[T]]:
    """Pick the target result with minimum distance.

    Used by SPFA, whose run has no settlement order and visits every
    reachable node. Ties are resolved by the position of the node in
    `results`, i.e. by first discovery. BFS and Dijkstra instead return the
    target that stopped their run (`SearchStats.stopped_at`).

    Args:
        results: Result map of a completed SPFA run.

    Returns:
        The closest flagged result, or None if no target was reached.
    """
    best: Optional[PathResult[T]] = None
    for result in results.values():
        if result.is_target and (best is None or result.dist < best.dist):
            best = result
    return best


@dataclass
class SearchStats:
    """Counters of a single engine run, reported at DEBUG level."""

    engine: str
    expanded: int = 0
    stopped_at: Optional[PathResult[Any]] = None

    def start(self, results: Dict[Any, PathResult[Any]]) -> None:
        logger.debug("%s started from %d source(s)", self.engine, len(results))

    def record_expansion(self, results: Dict[Any, PathResult[Any]]) -> None:
        """Count one provider invocation and log progress when due."""
        self.expanded += 1
        if SEARCH_CONFIG.should_report(self.expanded):
            logger.debug(
                "%s progress: %d expansions, %d nodes discovered",
                self.engine,
                self.expanded,
                len(results),
            )

    def finish(self, results: Dict[Any, PathResult[Any]]) -> None:
        if self.stopped_at is not None:
            logger.debug(
                "%s stopped at target %r: %d expansions, %d nodes discovered",
                self.engine,
                self.stopped_at.node,
                self.expanded,
                len(results),
            )
        else:
            logger.debug(
                "%s exhausted: %d expansions, %d nodes discovered",
                self.engine,
                self.expanded,
                len(results),
            )
