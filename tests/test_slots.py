import pytest

from cwkit.slots import SlotArg, accumulate_and, accumulate_or, arg


def test_accumulate_and_empty_is_true():
    assert accumulate_and([]) is True


def test_accumulate_or_empty_is_false():
    assert accumulate_or([]) is False


def test_accumulate_and_values():
    assert accumulate_and([True, 1, "x"]) is True
    assert accumulate_and([True, 0, True]) is False


def test_accumulate_or_values():
    assert accumulate_or([0, "", None]) is False
    assert accumulate_or([0, 3, None]) is True


def test_accumulate_and_short_circuits():
    values = iter([True, False, "rest"])
    assert accumulate_and(values) is False
    assert list(values) == ["rest"]


def test_accumulate_or_short_circuits():
    values = iter([False, True, "rest"])
    assert accumulate_or(values) is True
    assert list(values) == ["rest"]


def test_empty_slotarg_is_false_and_inert():
    empty = SlotArg(None)
    assert not empty
    assert empty(1, 2) is None


def test_slotarg_calls_slot():
    calls = []
    wrapped = SlotArg(lambda *a, **k: calls.append((a, k)) or "done")
    assert bool(wrapped) is True
    assert wrapped(1, key="v") == "done"
    assert calls == [((1,), {"key": "v"})]


def test_arg_wraps_slot():
    wrapped = arg(len)
    assert wrapped
    assert wrapped("abc") == 3


def test_slotarg_from_slotarg_shares_slot():
    inner = arg(str.upper)
    outer = SlotArg(inner)
    assert outer.slot is inner.slot
    assert outer("q") == "Q"


def test_slotarg_rejects_non_callable():
    with pytest.raises(TypeError):
        SlotArg(42)