from __future__ import annotations

from typing import Optional

from cycledecomp.config import default_divisor
from cycledecomp.exceptions import ScheduleError

from .queue import SizeQueue


def minimum_cycle_size(num_edges: int, divisor: Optional[int] = None) -> int:
    """floor(num_edges / divisor); divisor defaults to CYCLEDECOMP_DIVISOR or 3."""
    if divisor is None:
        divisor = default_divisor()
    if divisor < 1:
        raise ScheduleError(f"divisor must be a positive integer, got {divisor}")
    if num_edges < 0:
        raise ScheduleError(f"edge count must be non-negative, got {num_edges}")
    return num_edges // divisor


def schedule_cycle_sizes(num_edges: int, divisor: Optional[int] = None) -> SizeQueue[int]:
    """
    Queue of target cycle lengths for a graph with num_edges edges.

    With m = num_edges // divisor, m is enqueued while at least m edges are
    still unallocated, then the non-zero remainder.  The lengths sum to
    num_edges and there are ceil(num_edges / m) of them.

    Raises ScheduleError when m == 0 (fewer than ``divisor`` edges).
    """
    if divisor is None:
        divisor = default_divisor()
    m = minimum_cycle_size(num_edges, divisor)
    if m == 0:
        raise ScheduleError(
            f"minimum cycle size is 0 for {num_edges} edges with divisor {divisor}; "
            f"need at least {divisor} edges"
        )

    queue: SizeQueue[int] = SizeQueue()
    remaining = num_edges
    while remaining >= m:
        queue.enqueue(m)
        remaining -= m
    if remaining:
        queue.enqueue(remaining)
    return queue
