"""Tests for engine log output and the debug logging switch."""

import logging
from io import StringIO

import pytest

from pathsearch.algorithms import bfs, dijkstra, spfa
from pathsearch.algorithms.types import Edge
from pathsearch.config import SEARCH_CONFIG
from pathsearch.logging import disable_debug_logging, enable_debug_logging, get_logger

GRAPH = {"A": [Edge("B", 2)], "B": [Edge("C", 1)]}


def edges(node):
    return GRAPH.get(node, [])


def neighbors(node):
    return [e.node for e in GRAPH.get(node, [])]


@pytest.fixture
def capture():
    """Install a debug handler writing plain messages to a buffer."""
    stream = StringIO()
    enable_debug_logging(logging.StreamHandler(stream), format_string="%(message)s")
    return stream


def lines(stream):
    return stream.getvalue().splitlines()


def test_silent_by_default(capsys):
    """Importing and running engines writes nothing without configuration."""
    dijkstra.run("A", edges)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "engine, provider",
    [(bfs, neighbors), (dijkstra, edges), (spfa, edges)],
    ids=["bfs", "dijkstra", "spfa"],
)
def test_exhaustive_run_summary(capture, engine, provider):
    """Each engine logs its start and an exhaustion summary."""
    engine.run("A", provider)

    name = engine.__name__.rsplit(".", 1)[-1]
    assert lines(capture) == [
        f"{name} started from 1 source(s)",
        f"{name} exhausted: 3 expansions, 3 nodes discovered",
    ]


def test_stopped_run_summary(capture):
    """A run stopped by a target names the target; the target is not expanded."""
    dijkstra.find_path_from(["A", "Z"], edges, lambda n: n == "B")

    assert lines(capture) == [
        "dijkstra started from 2 source(s)",
        "dijkstra stopped at target 'B': 2 expansions, 3 nodes discovered",
    ]


def test_progress_lines_on_infinite_graph(capture):
    """Long searches report progress every configured number of expansions."""
    SEARCH_CONFIG.progress_interval = 50

    result = bfs.find_path(0, lambda n: (n + 1,), lambda n: n == 120)

    assert result is not None and result.dist == 120
    progress = [line for line in lines(capture) if "progress" in line]
    assert progress == [
        "bfs progress: 50 expansions, 50 nodes discovered",
        "bfs progress: 100 expansions, 100 nodes discovered",
    ]


def test_disable_stops_output(capture):
    """After disabling, runs no longer reach the handler."""
    disable_debug_logging()
    spfa.run("A", edges)

    assert capture.getvalue() == ""
    assert logging.getLogger("pathsearch").level == logging.NOTSET


def test_enable_replaces_previous_handler():
    """Enabling twice leaves only the newest debug handler installed."""
    first, second = StringIO(), StringIO()
    enable_debug_logging(logging.StreamHandler(first), format_string="%(message)s")
    enable_debug_logging(logging.StreamHandler(second), format_string="%(message)s")

    bfs.run("A", neighbors)

    assert first.getvalue() == ""
    assert "bfs exhausted: 3 expansions, 3 nodes discovered" in second.getvalue()
    streams = [
        h for h in logging.getLogger("pathsearch").handlers
        if isinstance(h, logging.StreamHandler)
    ]
    assert len(streams) == 1


def test_default_format_names_module():
    """The default format carries the emitting module's logger name."""
    stream = StringIO()
    enable_debug_logging(logging.StreamHandler(stream))

    bfs.run("A", neighbors)

    out = stream.getvalue()
    assert "pathsearch.algorithms.common - DEBUG - bfs started" in out


def test_get_logger_namespace():
    """Loggers are handed out only inside the package namespace."""
    assert get_logger("pathsearch.algorithms.bfs").name == "pathsearch.algorithms.bfs"

    with pytest.raises(ValueError, match="not in the 'pathsearch' namespace"):
        get_logger("pathsearchx")
