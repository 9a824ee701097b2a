"""Events for the main loop and a scheduler that posts them after a delay."""

from __future__ import annotations

import abc
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from .threads import ThreadError

# A timeout this close to its activation time (in seconds) counts as due.
_DUE_SLACK = 10e-6


class Event(abc.ABC):
    """An item in the main event queue; the main loop calls :meth:`dispatch`."""

    @abc.abstractmethod
    def dispatch(self) -> None:
        """Carry out the event."""


class SlotEvent(Event):
    """An event that calls a stored callback when dispatched."""

    def __init__(self, slot: Callable[[], object]) -> None:
        if not callable(slot):
            raise TypeError("slot must be callable")
        self.slot = slot

    def dispatch(self) -> None:
        self.slot()

    def __repr__(self) -> str:
        return f"SlotEvent({self.slot!r})"


class TimeoutScheduler:
    """Posts events once their delay has passed.

    Each timeout is handed to *post* (typically the main loop's
    ``post_event``) when it falls due.  :meth:`start` runs a background
    thread that does this; without it, :meth:`check_timeouts` can be
    called by hand.  Times are measured on the monotonic clock.
    """

    def __init__(self, post: Callable[[Event], object]) -> None:
        self._post = post
        self._timeouts: Dict[int, Tuple[Event, float]] = {}
        self._cond = threading.Condition()
        self._cancelled = False
        self._thread: Optional[threading.Thread] = None
        self._thread_lock = threading.Lock()

    def __len__(self) -> int:
        with self._cond:
            return len(self._timeouts)

    def add_timeout(self, event: Event, msecs: int) -> int:
        """Schedule *event* to be posted in *msecs* milliseconds.

        Returns an identifier that :meth:`del_timeout` accepts.  Identifiers
        are one more than the largest in use, or 0 when none are pending.
        """
        with self._cond:
            activate = time.monotonic() + msecs / 1000.0
            timeout_id = max(self._timeouts) + 1 if self._timeouts else 0
            self._timeouts[timeout_id] = (event, activate)
            self._cond.notify_all()
            return timeout_id

    def del_timeout(self, timeout_id: int) -> None:
        """Cancel the timeout *timeout_id*; unknown identifiers are ignored."""
        with self._cond:
            self._timeouts.pop(timeout_id, None)

    def check_timeouts(self) -> None:
        """Post and forget every timeout that has fallen due."""
        with self._cond:
            now = time.monotonic()
            due = [
                timeout_id
                for timeout_id, (_, activate) in self._timeouts.items()
                if activate - now <= _DUE_SLACK
            ]
            for timeout_id in sorted(due):
                event, _ = self._timeouts.pop(timeout_id)
                self._post(event)

    def first_timeout(self) -> Optional[float]:
        """Return when the earliest pending timeout should fire.

        The result is a monotonic-clock time; it is the current time if a
        timeout is already due, and ``None`` if nothing is pending.
        """
        with self._cond:
            if not self._timeouts:
                return None
            now = time.monotonic()
            earliest = min(activate for _, activate in self._timeouts.values())
            if earliest - now <= _DUE_SLACK:
                return now
            return earliest

    def start(self) -> None:
        """Start the background thread that posts due timeouts.

        Raises :class:`ThreadError` if the thread is already running.
        """
        with self._thread_lock:
            if self._thread is not None:
                raise ThreadError("Attempt to run a singleton thread twice!")
            with self._cond:
                self._cancelled = False
            self._thread = threading.Thread(
                target=self._run, name="cwkit-timeouts", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        """Stop the background thread, if it is running, and wait for it."""
        with self._thread_lock:
            thread = self._thread
            if thread is None:
                return
            with self._cond:
                self._cancelled = True
                self._cond.notify_all()
            thread.join()
            self._thread = None

    def _run(self) -> None:
        with self._cond:
            while not self._cancelled:
                next_time = self.first_timeout()
                if next_time is None:
                    self._cond.wait()
                    continue
                delay = next_time - time.monotonic()
                if delay > 0:
                    self._cond.wait(delay)
                if not self._cancelled:
                    self.check_timeouts()