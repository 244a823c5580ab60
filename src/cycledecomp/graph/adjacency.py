from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx

from cycledecomp.exceptions import GraphInputError


Edge = Tuple[int, int]


def _as_edge(edge: Sequence[int]) -> Edge:
    if len(edge) != 2:
        raise GraphInputError(f"edge must have exactly two endpoints, got {edge!r}")
    u, v = edge
    if u == v:
        raise GraphInputError(f"self-loop at vertex {u} is not supported")
    return u, v


class Graph:
    """
    Undirected multigraph stored as an adjacency map.

    vertices: vertex ids in insertion order; this is the order in which the
              cycle search tries start vertices.
    adj:      vertex -> neighbours in insertion order.  Symmetric, including
              multiplicity: v appears in adj[u] exactly as often as u in adj[v].

    The edge list passed to the constructor only seeds ``adj`` and is not kept.
    Endpoints that are missing from ``vertices`` are appended to it.
    Duplicate edges accumulate; self-loops raise GraphInputError.
    """

    def __init__(self, vertices: Iterable[int] = (), edges: Iterable[Sequence[int]] = ()):
        self.vertices: List[int] = list(dict.fromkeys(vertices))
        self.adj: Dict[int, List[int]] = {}
        self._members = set(self.vertices)
        for edge in edges:
            u, v = _as_edge(edge)
            self.add_edge(u, v)

    def _ensure_vertex(self, v: int) -> None:
        if v not in self._members:
            self._members.add(v)
            self.vertices.append(v)

    def _drop_vertex(self, v: int) -> None:
        del self.adj[v]
        if v in self._members:
            self._members.discard(v)
            self.vertices.remove(v)

    def add_edge(self, u: int, v: int) -> None:
        """Append v to adj[u] and u to adj[v]; duplicates are not guarded."""
        _as_edge((u, v))
        self._ensure_vertex(u)
        self._ensure_vertex(v)
        self.adj.setdefault(u, []).append(v)
        self.adj.setdefault(v, []).append(u)

    def remove_edge(self, u: int, v: int) -> None:
        """
        Remove one occurrence of the edge {u, v}.

        A vertex left without neighbours is removed from ``adj`` and from
        ``vertices``.  Removing an edge that is not present does nothing.
        """
        if not self.has_edge(u, v):
            return
        self.adj[u].remove(v)
        self.adj[v].remove(u)
        if not self.adj[u]:
            self._drop_vertex(u)
        if not self.adj[v]:
            self._drop_vertex(v)

    def has_edge(self, u: int, v: int) -> bool:
        return v in self.adj.get(u, ()) and u in self.adj.get(v, ())

    def neighbors(self, v: int) -> List[int]:
        return list(self.adj.get(v, ()))

    def edge_multiplicity(self, u: int, v: int) -> int:
        return self.adj.get(u, []).count(v)

    def edges(self) -> List[Edge]:
        """
        Return undirected edges as (u, v) with u < v, in adjacency order,
        repeated according to their multiplicity.
        """
        eds: List[Edge] = []
        for u, neigh in self.adj.items():
            for v in neigh:
                if v > u:
                    eds.append((u, v))
        return eds

    def number_of_edges(self) -> int:
        return sum(len(neigh) for neigh in self.adj.values()) // 2

    def number_of_vertices(self) -> int:
        return len(self.vertices)

    def copy(self) -> "Graph":
        """Deep copy; mutating the copy never touches this graph."""
        G = Graph(self.vertices)
        G.adj = {v: list(neigh) for v, neigh in self.adj.items()}
        return G

    def format_adjacency(self) -> str:
        return "\n".join(f"{v}: {neigh}" for v, neigh in self.adj.items())

    def to_nx(self) -> nx.MultiGraph:
        """Return a NetworkX MultiGraph with the same vertices and edges."""
        G = nx.MultiGraph()
        G.add_nodes_from(self.vertices)
        G.add_edges_from(self.edges())
        return G

    @classmethod
    def from_nx(cls, G: nx.Graph) -> "Graph":
        """Build a Graph from any undirected NetworkX graph with integer nodes."""
        if G.is_directed():
            raise GraphInputError("directed graphs are not supported")
        return cls(G.nodes(), ((u, v) for u, v, *_ in G.edges()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.vertices == other.vertices and self.adj == other.adj

    def __repr__(self) -> str:
        return f"Graph(|V|={self.number_of_vertices()}, |E|={self.number_of_edges()})"
