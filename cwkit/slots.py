"""Helpers for optional callbacks and boolean result accumulation."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional


def accumulate_and(results: Iterable[object]) -> bool:
    """Short-circuiting AND over *results*; ``True`` when empty."""
    for result in results:
        if not result:
            return False
    return True


def accumulate_or(results: Iterable[object]) -> bool:
    """Short-circuiting OR over *results*; ``False`` when empty."""
    for result in results:
        if result:
            return True
    return False


class SlotArg:
    """An optional callback.

    A ``SlotArg`` is true when it holds a callback.  Calling an empty
    ``SlotArg`` does nothing and returns ``None``.
    """

    def __init__(self, slot: Optional[Callable[..., Any]] = None) -> None:
        if isinstance(slot, SlotArg):
            slot = slot.slot
        if slot is not None and not callable(slot):
            raise TypeError("slot must be callable or None")
        self.slot = slot

    def __bool__(self) -> bool:
        return self.slot is not None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.slot is None:
            return None
        return self.slot(*args, **kwargs)

    def __repr__(self) -> str:
        return f"SlotArg({self.slot!r})"


def arg(slot: Callable[..., Any]) -> SlotArg:
    """Wrap *slot* in a :class:`SlotArg`."""
    return SlotArg(slot)