from __future__ import annotations

from .adjacency import Graph


DEMO_VERTICES = [0, 1, 2, 3, 4, 5, 6]

# 12 edges: the size scheduler asks for [4, 4, 4] and the search finds three
# edge-disjoint 4-cycles covering every edge.
DEMO_EDGES = [
    (0, 1),
    (0, 2),
    (1, 2),
    (1, 3),
    (1, 4),
    (2, 3),
    (2, 5),
    (3, 4),
    (3, 5),
    (4, 5),
    (4, 6),
    (5, 6),
]


def demo_graph() -> Graph:
    return Graph(DEMO_VERTICES, DEMO_EDGES)
