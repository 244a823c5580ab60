"""
cycledecomp: decompose undirected graphs into edge-disjoint cycles of
scheduled lengths, by depth-bounded backtracking search.
"""

from .exceptions import ConfigError, CycleDecompError, GraphInputError, ScheduleError
from .graph import Graph, demo_graph
from .schedule import SizeQueue, minimum_cycle_size, schedule_cycle_sizes
from .search import find_cycle, is_cycle, search_from
from .decompose import CycleStep, Decomposition, decompose, iter_disjoint_cycles
from .io import g6_to_graph, graph_to_g6, read_edgelist
from .utils import describe_edges, format_path

__all__ = [
    # Errors
    "ConfigError",
    "CycleDecompError",
    "GraphInputError",
    "ScheduleError",
    # Graph
    "Graph",
    "demo_graph",
    # Scheduling
    "SizeQueue",
    "minimum_cycle_size",
    "schedule_cycle_sizes",
    # Search
    "find_cycle",
    "is_cycle",
    "search_from",
    # Decomposition
    "CycleStep",
    "Decomposition",
    "decompose",
    "iter_disjoint_cycles",
    # IO
    "g6_to_graph",
    "graph_to_g6",
    "read_edgelist",
    # Utils
    "describe_edges",
    "format_path",
]
