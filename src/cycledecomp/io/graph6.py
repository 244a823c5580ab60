from __future__ import annotations

import networkx as nx

from cycledecomp.exceptions import GraphInputError
from cycledecomp.graph.adjacency import Graph


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_graph(g6: str) -> Graph:
    """
    Parse a graph6 string into a Graph on vertices 0..n-1.
    """
    s = strip_graph6_header(g6)
    try:
        G = nx.from_graph6_bytes(s.encode("ascii"))
    except (nx.NetworkXError, ValueError, IndexError) as exc:
        raise GraphInputError(f"invalid graph6 string {g6!r}: {exc}") from exc
    return Graph.from_nx(G)


def graph_to_g6(graph: Graph) -> str:
    """
    Encode a Graph as graph6.  Vertices must be 0..n-1 and parallel edges are
    collapsed, since graph6 only describes simple graphs.
    """
    n = graph.number_of_vertices()
    if sorted(graph.vertices) != list(range(n)):
        raise GraphInputError("graph6 needs vertices labelled 0..n-1")
    G = nx.Graph()
    G.add_nodes_from(range(n))
    G.add_edges_from(graph.edges())
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()
