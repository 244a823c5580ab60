"""Tests for cycledecomp.search module."""
import networkx as nx
import pytest

from cycledecomp.graph.adjacency import Graph
from cycledecomp.graph.demo import demo_graph
from cycledecomp.search.cycle import find_cycle, is_cycle, search_from


def _triangle():
    return Graph([0, 1, 2], [(0, 1), (1, 2), (2, 0)])


def _assert_valid(g, path, length):
    assert len(path) == length
    assert is_cycle(g, path)
    for u, v in path:
        assert v in g.adj[u] and u in g.adj[v]
    inner = [v for _, v in path[:-1]]
    assert len(set(inner)) == len(inner)
    assert path[-1][1] == path[0][0]


# --- find_cycle ---

def test_find_cycle_demo_first_in_dfs_order():
    g = demo_graph()
    path = find_cycle(g, 4)
    assert path == [(0, 1), (1, 3), (3, 2), (2, 0)]
    _assert_valid(g, path, 4)


def test_find_cycle_triangle():
    assert find_cycle(_triangle(), 3) == [(0, 1), (1, 2), (2, 0)]


def test_find_cycle_does_not_mutate():
    g = demo_graph()
    find_cycle(g, 5)
    assert g == demo_graph()


def test_find_cycle_lengths_in_k5():
    g = Graph.from_nx(nx.complete_graph(5))
    for length in (3, 4, 5):
        _assert_valid(g, find_cycle(g, length), length)
    assert find_cycle(g, 6) == []


def test_find_cycle_only_full_length_in_cycle_graph():
    g = Graph.from_nx(nx.cycle_graph(6))
    _assert_valid(g, find_cycle(g, 6), 6)
    for length in (3, 4, 5, 7):
        assert find_cycle(g, length) == []


def test_find_cycle_petersen_not_hamiltonian():
    g = Graph.from_nx(nx.petersen_graph())
    assert find_cycle(g, 10) == []


def test_find_cycle_petersen_girth():
    g = Graph.from_nx(nx.petersen_graph())
    assert find_cycle(g, 3) == []
    assert find_cycle(g, 4) == []
    _assert_valid(g, find_cycle(g, 5), 5)


def test_find_cycle_random_graphs_valid():
    for seed in range(10):
        G = nx.gnm_random_graph(9, 16, seed=seed)
        g = Graph.from_nx(G)
        for length in range(3, 8):
            path = find_cycle(g, length)
            if path:
                _assert_valid(g, path, length)
                assert nx.is_simple_path(G, [u for u, _ in path])


def test_find_cycle_not_found_idempotent():
    g = Graph.from_nx(nx.petersen_graph())
    assert find_cycle(g, 10) == find_cycle(g, 10) == []
    assert find_cycle(g, 5) == find_cycle(g, 5)


def test_find_cycle_length_two_needs_parallel_edge():
    assert find_cycle(Graph([0, 1], [(0, 1)]), 2) == []
    g = Graph([0, 1], [(0, 1), (0, 1)])
    path = find_cycle(g, 2)
    assert path == [(0, 1), (1, 0)]
    assert is_cycle(g, path)


def test_find_cycle_length_one_never_found():
    assert find_cycle(_triangle(), 1) == []


def test_find_cycle_rejects_non_positive_length():
    with pytest.raises(ValueError):
        find_cycle(_triangle(), 0)


def test_find_cycle_empty_graph():
    assert find_cycle(Graph(), 3) == []


def test_find_cycle_long_cycle_no_recursion_limit():
    n = 3000
    g = Graph.from_nx(nx.cycle_graph(n))
    path = find_cycle(g, n)
    assert len(path) == n
    assert is_cycle(g, path)


# --- search_from ---

def test_search_from_unknown_start():
    assert search_from(_triangle(), 99, 3) == []


def test_search_from_start_outside_cycle():
    # 3 hangs off the triangle and lies on no cycle
    g = Graph([0, 1, 2, 3], [(0, 1), (1, 2), (2, 0), (2, 3)])
    assert search_from(g, 3, 3) == []
    assert search_from(g, 2, 3) == [(2, 1), (1, 0), (0, 2)]


# --- is_cycle ---

def test_is_cycle_rejects_open_path():
    assert not is_cycle(_triangle(), [(0, 1), (1, 2)])


def test_is_cycle_rejects_missing_edge():
    g = Graph([0, 1, 2, 3], [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert not is_cycle(g, [(0, 1), (1, 3), (3, 0)])


def test_is_cycle_rejects_reused_edge():
    assert not is_cycle(Graph([0, 1], [(0, 1)]), [(0, 1), (1, 0)])


def test_is_cycle_rejects_repeated_vertex():
    bowtie = Graph(range(5), [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)])
    figure_eight = [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)]
    assert not is_cycle(bowtie, figure_eight)


def test_is_cycle_rejects_broken_chain():
    assert not is_cycle(_triangle(), [(0, 1), (2, 0)])


def test_is_cycle_empty():
    assert not is_cycle(_triangle(), [])
