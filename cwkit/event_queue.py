"""An unbounded, thread-safe FIFO used as the global event queue."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque, Optional


class EventQueue:
    """An unbounded channel between threads.

    Writers never block, except briefly to keep the queue consistent.
    Readers block while the queue is empty.  Items come out in the order
    they went in.
    """

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()
        self._cond = threading.Condition()

    def put(self, item: Any) -> None:
        """Append *item* to the queue and wake one waiting reader."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def get(self, timeout: Optional[float] = None) -> Any:
        """Remove and return the oldest item, waiting while the queue is empty.

        Raises :class:`TimeoutError` if *timeout* seconds pass with no item.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: bool(self._items), timeout):
                raise TimeoutError("timed out waiting for an event")
            return self._items.popleft()

    def try_get(self, default: Any = None) -> Any:
        """Remove and return the oldest item, or *default* if there is none."""
        with self._cond:
            if not self._items:
                return default
            return self._items.popleft()

    def empty(self) -> bool:
        """Return whether the queue currently holds no items."""
        with self._cond:
            return not self._items

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)

    def __repr__(self) -> str:
        return f"EventQueue(<{len(self)} items>)"