"""Tests for cycledecomp.decompose module."""
import logging
from collections.abc import Hashable

import networkx as nx
import pytest

from cycledecomp.decompose import CycleStep, decompose, iter_disjoint_cycles
from cycledecomp.exceptions import ScheduleError
from cycledecomp.graph.adjacency import Graph
from cycledecomp.graph.demo import DEMO_EDGES, demo_graph
from cycledecomp.schedule import SizeQueue
from cycledecomp.search.cycle import is_cycle


DEMO_CYCLES = (
    [(0, 1), (1, 3), (3, 2), (2, 0)],
    [(1, 2), (2, 5), (5, 4), (4, 1)],
    [(3, 4), (4, 6), (6, 5), (5, 3)],
)


def _k4():
    return Graph.from_nx(nx.complete_graph(4))


# --- end to end ---

def test_demo_decomposes_into_three_4_cycles():
    res = decompose(demo_graph())
    assert res.cycles == DEMO_CYCLES
    assert res.skipped == ()
    assert res.is_complete
    assert res.remaining.number_of_edges() == 0
    assert res.remaining.vertices == []
    assert res.remaining.adj == {}


def test_demo_cycles_are_edge_disjoint_and_cover():
    g = demo_graph()
    res = decompose(g)
    for path in res.cycles:
        assert is_cycle(g, path)
    covered = res.covered_edges
    assert len(covered) == len(set(covered)) == 12
    assert set(covered) == set(DEMO_EDGES)
    assert res.uncovered_edges == []


def test_caller_graph_untouched():
    g = demo_graph()
    decompose(g)
    list(iter_disjoint_cycles(g))
    assert g == demo_graph()


def test_iter_disjoint_cycles_steps():
    steps = list(iter_disjoint_cycles(demo_graph()))
    assert [s.size for s in steps] == [4, 4, 4]
    assert all(s.found for s in steps)
    assert tuple(s.path for s in steps) == DEMO_CYCLES


def test_iter_disjoint_cycles_is_lazy():
    it = iter_disjoint_cycles(demo_graph())
    first = next(it)
    assert first == CycleStep(size=4, path=DEMO_CYCLES[0])


# --- configuration errors ---

def test_too_few_edges_raises():
    g = Graph([0, 1, 2], [(0, 1), (1, 2)])
    with pytest.raises(ScheduleError):
        decompose(g)


def test_too_few_edges_raises_before_iteration():
    g = Graph([0, 1], [(0, 1)])
    with pytest.raises(ScheduleError):
        iter_disjoint_cycles(g)


def test_empty_graph_raises():
    with pytest.raises(ScheduleError):
        decompose(Graph())


# --- not found / partial coverage ---

def test_not_found_leaves_graph_unchanged():
    g = Graph.from_nx(nx.petersen_graph())
    res = decompose(g, sizes=[10])
    assert res.cycles == ()
    assert res.skipped == (10,)
    assert res.remaining == g
    assert not res.is_complete


def test_each_size_attempted_once():
    # K4 has 6 edges -> [2, 2, 2]; a simple graph has no 2-cycles
    res = decompose(_k4())
    assert res.skipped == (2, 2, 2)
    assert res.cycles == ()
    assert res.remaining.number_of_edges() == 6


def test_partial_coverage_reported():
    res = decompose(_k4(), sizes=[3, 3])
    assert res.cycles == ([(0, 1), (1, 2), (2, 0)],)
    assert res.skipped == (3,)
    assert not res.is_complete
    assert res.uncovered_edges == [(0, 3), (1, 3), (2, 3)]


def test_partial_coverage_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="cycledecomp.decompose.decomposer"):
        decompose(_k4(), sizes=[3, 3])
    assert "no cycle of length 3" in caplog.text
    assert "decomposition incomplete" in caplog.text


def test_sizes_from_queue_are_consumed():
    q = SizeQueue([4, 4, 4])
    res = decompose(demo_graph(), sizes=q)
    assert res.is_complete
    assert q.is_empty()


def test_custom_divisor():
    # 12 edges with divisor 2 -> [6, 6]
    res = decompose(demo_graph(), divisor=2)
    requested = sorted([len(p) for p in res.cycles] + list(res.skipped))
    assert requested == [6, 6]
    for path in res.cycles:
        assert is_cycle(demo_graph(), path)
    assert len(res.covered_edges) + len(res.uncovered_edges) == 12


def test_found_cycles_valid_on_random_graphs():
    for seed in range(8):
        g = Graph.from_nx(nx.gnm_random_graph(10, 18, seed=seed))
        res = decompose(g)
        seen = set()
        for path in res.cycles:
            assert is_cycle(g, path)
            for u, v in path:
                e = (u, v) if u < v else (v, u)
                assert e not in seen
                seen.add(e)
        assert len(res.covered_edges) + len(res.uncovered_edges) == 18


def test_results_are_not_hashable():
    res = decompose(demo_graph())
    step = next(iter_disjoint_cycles(demo_graph()))
    assert not isinstance(res, Hashable)
    assert not isinstance(step, Hashable)
    with pytest.raises(TypeError):
        hash(step)
