import threading
import time

import pytest

from cwkit.errors import CWidgetError
from cwkit.events import Event, SlotEvent, TimeoutScheduler
from cwkit.threads import ThreadError


class Marker(Event):
    def __init__(self, name):
        self.name = name
        self.dispatched = 0

    def dispatch(self):
        self.dispatched += 1


def make_scheduler():
    posted = []
    return TimeoutScheduler(posted.append), posted


def test_event_is_abstract():
    with pytest.raises(TypeError):
        Event()


def test_slot_event_calls_slot():
    calls = []
    ev = SlotEvent(lambda: calls.append("hit"))
    ev.dispatch()
    ev.dispatch()
    assert calls == ["hit", "hit"]


def test_slot_event_requires_callable():
    with pytest.raises(TypeError):
        SlotEvent(42)


def test_timeout_ids_start_at_zero_and_increase():
    sched, _ = make_scheduler()
    ids = [sched.add_timeout(Marker(str(i)), 100000) for i in range(3)]
    assert ids == [0, 1, 2]
    assert len(sched) == 3


def test_id_follows_largest_in_use():
    sched, _ = make_scheduler()
    a = sched.add_timeout(Marker("a"), 100000)
    b = sched.add_timeout(Marker("b"), 100000)
    sched.del_timeout(b)
    assert sched.add_timeout(Marker("c"), 100000) == b
    sched.del_timeout(a)
    sched.del_timeout(b)
    assert sched.add_timeout(Marker("d"), 100000) == 0


def test_del_unknown_timeout_is_ignored():
    sched, _ = make_scheduler()
    sched.add_timeout(Marker("a"), 100000)
    sched.del_timeout(99)
    assert len(sched) == 1


def test_check_timeouts_posts_due_events_only():
    sched, posted = make_scheduler()
    due = Marker("due")
    later = Marker("later")
    sched.add_timeout(due, 0)
    sched.add_timeout(later, 100000)
    sched.check_timeouts()
    assert posted == [due]
    assert len(sched) == 1
    sched.check_timeouts()
    assert posted == [due]


def test_deleted_timeout_is_never_posted():
    sched, posted = make_scheduler()
    tid = sched.add_timeout(Marker("x"), 0)
    sched.del_timeout(tid)
    sched.check_timeouts()
    assert posted == []


def test_first_timeout_empty():
    sched, _ = make_scheduler()
    assert sched.first_timeout() is None


def test_first_timeout_returns_earliest():
    sched, _ = make_scheduler()
    before = time.monotonic()
    sched.add_timeout(Marker("late"), 200000)
    sched.add_timeout(Marker("early"), 100000)
    first = sched.first_timeout()
    after = time.monotonic()
    assert before + 100 <= first <= after + 100


def test_first_timeout_due_is_now():
    sched, _ = make_scheduler()
    sched.add_timeout(Marker("now"), 0)
    before = time.monotonic()
    first = sched.first_timeout()
    after = time.monotonic()
    assert before <= first <= after


def test_background_thread_posts_event():
    fired = threading.Event()
    posted = []

    def post(ev):
        posted.append(ev)
        fired.set()

    sched = TimeoutScheduler(post)
    sched.start()
    try:
        ev = Marker("bg")
        sched.add_timeout(ev, 10)
        assert fired.wait(5)
    finally:
        sched.stop()
    assert posted == [ev]
    assert len(sched) == 0


def test_start_twice_raises():
    sched, _ = make_scheduler()
    sched.start()
    try:
        with pytest.raises(ThreadError) as info:
            sched.start()
        assert isinstance(info.value, CWidgetError)
        assert info.value.errmsg() == "Attempt to run a singleton thread twice!"
    finally:
        sched.stop()


def test_restart_after_stop():
    fired = threading.Event()
    sched = TimeoutScheduler(lambda ev: fired.set())
    sched.start()
    sched.stop()
    sched.stop()
    sched.start()
    try:
        sched.add_timeout(Marker("again"), 0)
        assert fired.wait(5)
    finally:
        sched.stop()