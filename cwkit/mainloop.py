"""The main event loop: event dispatch, merged screen updates and timeouts."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from .event_queue import EventQueue
from .events import Event, TimeoutScheduler

_VERSION = "0.1.0"

Callback = Optional[Callable[[], object]]


def version() -> str:
    """Return the version number of the library."""
    return _VERSION


@dataclass
class _UpdateState:
    """Which kinds of screen work are waiting to be done."""

    layout: bool = False
    update: bool = False
    cursor: bool = False


class _TryUpdateEvent(Event):
    def __init__(self, loop: "MainLoop") -> None:
        self._loop = loop

    def dispatch(self) -> None:
        self._loop.try_update()


class _WakeEvent(Event):
    """Does nothing; only wakes a loop that is waiting for events."""

    def dispatch(self) -> None:
        pass


class MainLoop:
    """Dispatches events one at a time and merges requests to redraw.

    Events may be posted from any thread with :meth:`post_event`; they are
    dispatched, in order, by :meth:`run` or :meth:`poll` while the loop's
    lock is held.  Requests for layout, redraw and cursor updates are
    merged: however many arrive before the next :meth:`try_update`, each of
    *on_layout*, *on_update* and *on_cursor* is called at most once.

    Callables in :attr:`main_hook` are called after every batch of events.
    """

    def __init__(
        self,
        on_layout: Callback = None,
        on_update: Callback = None,
        on_cursor: Callback = None,
    ) -> None:
        self.on_layout = on_layout
        self.on_update = on_update
        self.on_cursor = on_cursor
        self.main_hook: List[Callable[[], object]] = []

        self._lock = threading.RLock()
        self._pending_lock = threading.RLock()
        self._pending = _UpdateState()
        self._queue = EventQueue()
        self._should_exit = False
        self._running = 0
        self._suspend_count = 0
        self._suspend_lock = threading.Lock()
        self._scheduler = TimeoutScheduler(self.post_event)
        self._scheduler.start()
        self._active = True

    @property
    def lock(self) -> threading.RLock:
        """The lock held while events are dispatched or the screen is drawn."""
        return self._lock

    def __enter__(self) -> "MainLoop":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    # Events -------------------------------------------------------------

    def post_event(self, event: Event) -> None:
        """Queue *event* for dispatch; safe to call from any thread."""
        self._queue.put(event)

    def _run_hooks(self) -> None:
        for hook in list(self.main_hook):
            hook()

    def _drain(self) -> bool:
        dispatched = False
        while True:
            event = self._queue.try_get()
            if event is None:
                return dispatched
            dispatched = True
            event.dispatch()

    def poll(self) -> bool:
        """Dispatch every queued event without waiting.

        Returns ``True`` if any event was dispatched.
        """
        with self._lock:
            dispatched = self._drain()
            self._run_hooks()
            return dispatched

    def run(self) -> None:
        """Dispatch events until :meth:`exit` is called.

        An exception raised by an event propagates out of this method.
        """
        with self._lock:
            self._running += 1
        try:
            while True:
                with self._lock:
                    if self._should_exit:
                        break
                event = self._queue.get()
                with self._lock:
                    event.dispatch()
                    self._drain()
                    self._run_hooks()
            with self._lock:
                self._should_exit = False
        finally:
            with self._lock:
                self._running -= 1

    def exit(self) -> None:
        """Make :meth:`run` return once the current batch of events is done."""
        self._should_exit = True
        if self._running:
            self.post_event(_WakeEvent())

    # Timeouts -----------------------------------------------------------

    def add_timeout(self, event: Event, msecs: int) -> int:
        """Post *event* in at least *msecs* milliseconds.

        Returns an identifier for :meth:`del_timeout`, or -1 if *msecs* is
        negative, in which case nothing is scheduled.
        """
        if msecs < 0:
            return -1
        return self._scheduler.add_timeout(event, msecs)

    def del_timeout(self, timeout_id: int) -> None:
        """Cancel the timeout *timeout_id*."""
        self._scheduler.del_timeout(timeout_id)

    # Screen updates -----------------------------------------------------

    def update(self) -> None:
        """Request a redraw; may be called from any thread."""
        with self._pending_lock:
            self._pending.update = True
            self._pending.cursor = True
            self.post_event(_TryUpdateEvent(self))

    def queue_layout(self) -> None:
        """Request a new layout and a redraw; may be called from any thread."""
        with self._pending_lock:
            self._pending.layout = True
            self._pending.update = True
            self._pending.cursor = True
            self.post_event(_TryUpdateEvent(self))

    def update_cursor(self) -> None:
        """Request a cursor update at the next :meth:`try_update`."""
        with self._pending_lock:
            self._pending.cursor = True

    def try_update(self) -> None:
        """Carry out every pending layout, redraw and cursor update."""
        with self._lock, self._pending_lock:
            needs = self._pending
            if needs.layout and self.on_layout is not None:
                self.on_layout()
            if needs.update and self.on_update is not None:
                self.on_update()
            if (needs.update or needs.cursor) and self.on_cursor is not None:
                self.on_cursor()
            self._pending = _UpdateState()

    # Suspending and shutting down ----------------------------------------

    def suspend(self) -> None:
        """Stop posting timeouts until :meth:`resume` is called."""
        with self._lock:
            self._scheduler.stop()
            with self._suspend_lock:
                self._suspend_count += 1
            self._active = False

    def resume(self) -> None:
        """Resume after :meth:`suspend` and redraw the display."""
        with self._lock:
            if self._active:
                return
            self._active = True
            if self.on_update is not None:
                self.on_update()
            self._scheduler.start()

    def shutdown(self) -> None:
        """Suspend the loop and throw away every queued event."""
        with self._lock:
            if self._active:
                self.suspend()
            while self._queue.try_get() is not None:
                pass

    def suspend_count(self) -> int:
        """Return how many times the loop has been suspended."""
        with self._suspend_lock:
            return self._suspend_count