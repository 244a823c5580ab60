from .edgelist import read_edgelist
from .graph6 import g6_to_graph, graph_to_g6, strip_graph6_header

__all__ = [
    "read_edgelist",
    "g6_to_graph",
    "graph_to_g6",
    "strip_graph6_header",
]
