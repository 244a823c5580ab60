from .adjacency import Edge, Graph
from .demo import DEMO_EDGES, DEMO_VERTICES, demo_graph

__all__ = [
    "Edge",
    "Graph",
    "DEMO_EDGES",
    "DEMO_VERTICES",
    "demo_graph",
]
