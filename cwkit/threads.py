"""Thread-related errors and a blocking single-slot container."""

from __future__ import annotations

import errno
import threading
from typing import Any, Callable, Optional

from .errors import CWidgetError
from .i18n import translate

_JOIN_REASONS = {
    errno.ESRCH: "Invalid thread ID.",
    errno.EINVAL: "Thread previously detached or joined",
    errno.EDEADLK: "Deadlock (attempt to self-join)",
}


class ThreadError(CWidgetError):
    """Base class for all thread-related errors."""


class ThreadCreateError(ThreadError):
    """Raised when a thread could not be created."""

    def __init__(self, errnum: int) -> None:
        self.errnum = errnum
        super().__init__(self.errmsg())

    def errmsg(self) -> str:
        return translate("Not enough resources to create thread")


class ThreadJoinError(ThreadError):
    """Raised when joining a thread fails."""

    def __init__(self, errnum: int) -> None:
        self.errnum = errnum
        self.reason = "Unable to join thread: %s" % _JOIN_REASONS.get(errnum, "")
        super().__init__(self.reason)

    def errmsg(self) -> str:
        return self.reason


class ConditionNotLockedError(ThreadError):
    """Raised when waiting on a condition whose lock is not held."""

    def errmsg(self) -> str:
        return "Attempt to wait on a condition with a non-locked mutex"


class DoubleLockError(ThreadError):
    """Raised when a non-recursive lock is acquired twice."""

    def errmsg(self) -> str:
        return "Mutex double-locked"


class Box:
    """A container that is either empty or holds exactly one value.

    :meth:`take` blocks while the box is empty and :meth:`put` blocks
    while it is full, so a box works as a one-element channel between
    threads.
    """

    def __init__(self, *args: Any) -> None:
        if len(args) > 1:
            raise TypeError(f"Box() takes at most 1 argument ({len(args)} given)")
        self._cond = threading.Condition()
        self._value: Any = args[0] if args else None
        self._filled = bool(args)

    def filled(self) -> bool:
        """Return whether the box currently holds a value."""
        with self._cond:
            return self._filled

    def take(self, timeout: Optional[float] = None) -> Any:
        """Remove and return the value, waiting until there is one.

        Raises :class:`TimeoutError` if *timeout* seconds pass first.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._filled, timeout):
                raise TimeoutError("timed out waiting for a value in the box")
            value = self._value
            self._value = None
            self._filled = False
            self._cond.notify_all()
            return value

    def put(self, value: Any, timeout: Optional[float] = None) -> None:
        """Place *value* in the box, waiting until it is empty.

        Raises :class:`TimeoutError` if *timeout* seconds pass first.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: not self._filled, timeout):
                raise TimeoutError("timed out waiting for the box to empty")
            self._value = value
            self._filled = True
            self._cond.notify_all()

    def try_take(self, default: Any = None) -> Any:
        """Remove and return the value if there is one, else *default*."""
        with self._cond:
            if not self._filled:
                return default
            value = self._value
            self._value = None
            self._filled = False
            self._cond.notify_all()
            return value

    def try_put(self, value: Any) -> bool:
        """Place *value* in the box if it is empty; return whether it was."""
        with self._cond:
            if self._filled:
                return False
            self._value = value
            self._filled = True
            self._cond.notify_all()
            return True

    def update(self, mutator: Callable[[Any], Any]) -> None:
        """Replace the value with ``mutator(value)``, waiting for a value.

        If *mutator* raises, the box is left unchanged.
        """
        with self._cond:
            self._cond.wait_for(lambda: self._filled)
            self._value = mutator(self._value)
            self._cond.notify_all()

    def __repr__(self) -> str:
        with self._cond:
            if self._filled:
                return f"Box({self._value!r})"
            return "Box()"