"""NetworkX adapters for the search engines.

Builds neighbor and edge providers from an explicit NetworkX graph so that
classic finite graphs can be searched with the same engines as implicit ones.
The graph is read lazily: each provider call looks up the adjacency of one
node only.

Example:
    >>> import networkx as nx
    >>> from pathsearch import dijkstra
    >>> from pathsearch.lib.nx import edge_provider
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2)
    >>> G.add_edge("B", "C", weight=3)
    >>> dijkstra.find_path("A", edge_provider(G), lambda n: n == "C").dist
    5
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Hashable, Iterator, List, Union

from pathsearch.algorithms.types import Cost, Edge

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def _check_graph(G: NxGraph) -> None:
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )


def _weight(data: dict, weight: str, default: Cost) -> Cost:
    value = data.get(weight, default)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"Edge attribute '{weight}' must be numeric, got {value!r}")
    return value


def neighbor_provider(G: NxGraph) -> Callable[[Hashable], List[Hashable]]:
    """Create a BFS neighbor provider from a NetworkX graph.

    Directed graphs follow out-edges; undirected graphs use all neighbors.
    Parallel edges of multigraphs collapse to a single neighbor.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).

    Returns:
        Callable mapping a node to the list of its neighbors.

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    _check_graph(G)

    def neighbors(node: Hashable) -> List[Hashable]:
        return list(G.adj[node])

    return neighbors


def edge_provider(
    G: NxGraph,
    weight: str = "weight",
    default: Cost = 1,
) -> Callable[[Hashable], Iterator[Edge[Hashable]]]:
    """Create a weighted edge provider from a NetworkX graph.

    Every edge becomes one ``Edge`` record; in multigraphs each parallel edge is
    reported separately and the engines keep the cheapest one.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight: Edge attribute holding the weight (default: "weight").
        default: Weight used when the attribute is missing (default: 1).

    Returns:
        Callable mapping a node to an iterator over its outgoing edges.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: (on iteration) if an edge weight is not numeric.
    """
    _check_graph(G)
    is_multigraph = G.is_multigraph()

    def edges(node: Hashable) -> Iterator[Edge[Hashable]]:
        for neighbor, data in G.adj[node].items():
            if is_multigraph:
                for edge_data in data.values():
                    yield Edge(neighbor, _weight(edge_data, weight, default))
            else:
                yield Edge(neighbor, _weight(data, weight, default))

    return edges
