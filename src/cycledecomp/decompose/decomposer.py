from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from cycledecomp.graph.adjacency import Edge, Graph
from cycledecomp.schedule import SizeQueue, schedule_cycle_sizes
from cycledecomp.search.cycle import Path, find_cycle
from cycledecomp.utils.naming import format_path

logger = logging.getLogger(__name__)


@dataclass(eq=True, frozen=True, unsafe_hash=False)
class CycleStep:
    """
    Outcome of one queue entry.

    size: the requested cycle length.
    path: the cycle as directed edges, or [] if none of that length was left.

    Immutable but not hashable, since path is a list.
    """

    size: int
    path: Path

    __hash__ = None

    @property
    def found(self) -> bool:
        return bool(self.path)


@dataclass(eq=True, frozen=True, unsafe_hash=False)
class Decomposition:
    """
    Result of running the decomposer to completion.

    cycles:    found cycles, in the order they were removed.
    skipped:   requested lengths for which no cycle was found.
    remaining: the working graph after every found cycle was removed.

    Immutable but not hashable: the cycles are lists and Graph is mutable.
    """

    cycles: Tuple[Path, ...]
    skipped: Tuple[int, ...]
    remaining: Graph

    __hash__ = None

    @property
    def is_complete(self) -> bool:
        return self.remaining.number_of_edges() == 0

    @property
    def covered_edges(self) -> List[Edge]:
        return [(u, v) if u < v else (v, u) for path in self.cycles for u, v in path]

    @property
    def uncovered_edges(self) -> List[Edge]:
        return self.remaining.edges()


def _build_queue(
    working: Graph,
    sizes: Optional[Iterable[int]],
    divisor: Optional[int],
) -> SizeQueue[int]:
    if sizes is None:
        return schedule_cycle_sizes(working.number_of_edges(), divisor)
    if isinstance(sizes, SizeQueue):
        return sizes
    return SizeQueue(sizes)


def _consume(working: Graph, queue: SizeQueue[int]) -> Iterator[CycleStep]:
    while not queue.is_empty():
        size = queue.dequeue()
        path = find_cycle(working, size)
        if path:
            logger.debug("cycle of length %d: %s", size, format_path(path))
            for u, v in path:
                working.remove_edge(u, v)
        else:
            logger.warning("no cycle of length %d in the working graph; skipping", size)
        yield CycleStep(size=size, path=path)


def iter_disjoint_cycles(
    graph: Graph,
    sizes: Optional[Iterable[int]] = None,
    *,
    divisor: Optional[int] = None,
) -> Iterator[CycleStep]:
    """
    Yield one CycleStep per scheduled length, removing each found cycle from a
    private copy of *graph* before the next search.

    sizes: lengths to request, in order.  Defaults to
           schedule_cycle_sizes(graph.number_of_edges(), divisor), which raises
           ScheduleError here, before the first step, for too few edges.

    The caller's graph is never modified.
    """
    working = graph.copy()
    queue = _build_queue(working, sizes, divisor)
    return _consume(working, queue)


def decompose(
    graph: Graph,
    sizes: Optional[Iterable[int]] = None,
    *,
    divisor: Optional[int] = None,
) -> Decomposition:
    """
    Run the decomposition loop until the size queue is empty.

    Each queued length is tried once; lengths that cannot be found are
    recorded in ``skipped`` and the working graph is left as it was.
    """
    working = graph.copy()
    queue = _build_queue(working, sizes, divisor)
    logger.info("%r: scheduled cycle lengths %s", graph, list(queue))

    cycles: List[Path] = []
    skipped: List[int] = []
    for step in _consume(working, queue):
        if step.found:
            cycles.append(step.path)
        else:
            skipped.append(step.size)

    result = Decomposition(cycles=tuple(cycles), skipped=tuple(skipped), remaining=working)
    if not result.is_complete:
        logger.warning(
            "decomposition incomplete: %d of %d edges not covered by a cycle",
            working.number_of_edges(),
            graph.number_of_edges(),
        )
    return result
