from .cycle import Path, find_cycle, is_cycle, search_from

__all__ = [
    "Path",
    "find_cycle",
    "is_cycle",
    "search_from",
]
