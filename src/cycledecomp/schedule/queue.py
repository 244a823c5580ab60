from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, TypeVar


T = TypeVar("T")


class SizeQueue(Generic[T]):
    """First-in first-out queue of scheduled items."""

    def __init__(self, items: Iterable[T] = ()):
        self._items: deque[T] = deque(items)

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def dequeue(self) -> T:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SizeQueue({list(self._items)!r})"
