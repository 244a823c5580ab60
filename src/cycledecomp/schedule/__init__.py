from .queue import SizeQueue
from .sizes import minimum_cycle_size, schedule_cycle_sizes

__all__ = [
    "SizeQueue",
    "minimum_cycle_size",
    "schedule_cycle_sizes",
]
