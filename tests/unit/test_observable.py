"""Tests for the Observable/Signal event helpers."""

from tabgrid.utils.events import Observable, Signal


class Counter(Observable):
    value_changed = Signal(int)
    reset = Signal()


def test_emit_reaches_connected_callbacks():
    counter = Counter()
    received = []
    counter.value_changed.connect(received.append)

    counter.value_changed.emit(3)

    assert received == [3]


def test_signals_are_per_instance():
    a, b = Counter(), Counter()
    received = []
    a.value_changed.connect(received.append)

    b.value_changed.emit(1)

    assert received == []
    assert a.value_changed is a.value_changed
    assert a.value_changed is not b.value_changed


def test_duplicate_connect_is_ignored():
    counter = Counter()
    received = []
    counter.value_changed.connect(received.append)
    counter.value_changed.connect(received.append)

    counter.value_changed.emit(1)

    assert received == [1]
    assert counter.value_changed.receiver_count == 1


def test_disconnect_one_and_all():
    counter = Counter()
    first, second = [], []
    counter.reset.connect(lambda: first.append(True))
    counter.value_changed.connect(second.append)

    counter.value_changed.disconnect(second.append)
    counter.value_changed.emit(1)
    counter.reset.disconnect()
    counter.reset.emit()

    assert first == []
    assert second == []


def test_failing_callback_does_not_block_others():
    counter = Counter()
    received = []

    def broken(_value):
        raise RuntimeError("boom")

    counter.value_changed.connect(broken)
    counter.value_changed.connect(received.append)

    counter.value_changed.emit(7)

    assert received == [7]


def test_class_access_returns_descriptor():
    assert isinstance(Counter.value_changed, Signal)
    assert Counter.value_changed.name == "value_changed"
