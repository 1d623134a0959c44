"""Tests for the EventEmitter."""

from menube_lib.menu import EventEmitter


def test_emit_delivers_arguments_in_registration_order():
    emitter = EventEmitter()
    calls = []
    emitter.on("x", lambda *args: calls.append(("first", args)))
    emitter.on("x", lambda *args: calls.append(("second", args)))

    assert emitter.emit("x", 1, "two") is True
    assert calls == [("first", (1, "two")), ("second", (1, "two"))]


def test_emit_without_listeners_returns_false():
    assert EventEmitter().emit("nobody") is False


def test_off_removes_listener():
    emitter = EventEmitter()
    calls = []

    def listener():
        calls.append(1)

    emitter.on("x", listener)
    emitter.off("x", listener)
    emitter.off("x", listener)
    emitter.emit("x")

    assert calls == []
    assert emitter.listener_count("x") == 0


def test_once_fires_a_single_time():
    emitter = EventEmitter()
    calls = []

    emitter.once("x", lambda value: calls.append(value))
    emitter.emit("x", 1)
    emitter.emit("x", 2)

    assert calls == [1]


def test_once_listener_can_be_removed_with_off():
    emitter = EventEmitter()
    calls = []

    def listener():
        calls.append(1)

    emitter.once("x", listener)
    emitter.off("x", listener)
    emitter.emit("x")

    assert calls == []


def test_failing_listener_does_not_stop_others(caplog):
    emitter = EventEmitter()
    calls = []

    def broken():
        raise ValueError("bad listener")

    emitter.on("x", broken)
    emitter.on("x", lambda: calls.append("ok"))

    assert emitter.emit("x") is True
    assert calls == ["ok"]
    assert "bad listener" in caplog.text
