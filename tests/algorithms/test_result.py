import dataclasses

import pytest

from pathsearch.algorithms import bfs
from pathsearch.algorithms.result import PathResult


def chain(*nodes):
    result = None
    for dist, node in enumerate(nodes):
        result = PathResult(node, dist, False, result)
    return result


class TestPathResult:
    def test_path_walks_predecessors(self):
        """The path runs from the root result to this one."""
        result = chain("A", "B", "C")

        assert result.path == ("A", "B", "C")
        assert result.prev.path == ("A", "B")
        assert result.source == "A"

    def test_source_result(self):
        """A source result has a single-node path."""
        result = PathResult("A", 0, True, None)

        assert result.path == ("A",)
        assert result.source == "A"
        assert result.is_target

    def test_path_is_cached(self):
        """The path is built once and returned as the same object afterwards."""
        result = chain(1, 2, 3)
        assert result.path is result.path

    def test_long_chain(self):
        """Long predecessor chains do not recurse."""
        result = chain(*range(50_000))

        assert len(result.path) == 50_000
        assert result.path[0] == 0
        assert result.path[-1] == 49_999

    def test_immutable(self):
        """Fields cannot be reassigned."""
        result = PathResult("A", 0, False, None)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.dist = 5

    def test_identity_equality(self):
        """Results compare by identity, not by content."""
        first = PathResult("A", 0, False, None)
        second = PathResult("A", 0, False, None)

        assert first == first
        assert first != second
        assert len({first, second}) == 2

    def test_repr_omits_predecessor(self):
        """The repr stays short for deep results."""
        text = repr(chain("A", "B"))

        assert "node='B'" in text
        assert "dist=1" in text
        assert "prev" not in text

    def test_bfs_paths_match_distances(self, simple_graph):
        """For BFS the path has exactly dist + 1 nodes."""
        results = bfs.run("A", lambda n: simple_graph.get(n, []))

        for node, result in results.items():
            assert len(result.path) - 1 == result.dist
            assert result.path[0] == "A"
            assert result.path[-1] == node
            for u, v in zip(result.path, result.path[1:]):
                assert v in simple_graph[u]
