import pytest

from eventemitter import NEW_LISTENER, InvalidListenerError, OnceWrapper, current_emitter, listener_count


def test_once_rejects_non_callable(emitter):
    with pytest.raises(InvalidListenerError):
        emitter.once("abc", "abc")

    assert listener_count(emitter, "abc") == 0


def test_once_registers_wrapper(emitter, foo):
    emitter.once("foo", foo)

    entries = emitter.listeners("foo")
    assert len(entries) == 1
    assert isinstance(entries[0], OnceWrapper)
    assert entries[0].listener is foo


def test_once_runs_listener_a_single_time(emitter, foo, calls):
    emitter.once("foo", foo)

    assert emitter.emit("foo") is True
    assert emitter.emit("foo") is False
    assert calls == [("foo", ())]


def test_once_removes_entry_after_emit(emitter, foo, bar):
    emitter.on("foo", bar)
    emitter.once("foo", foo)
    emitter.emit("foo")

    assert emitter.listeners("foo") == [bar]


def test_once_leaves_empty_list_behind(emitter, foo):
    emitter.once("foo", foo)
    emitter.emit("foo")

    assert emitter.listeners("foo") == []
    assert "foo" in emitter._events


def test_once_forwards_all_arguments(emitter, foo, calls):
    payload = {}
    emitter.once("foo", foo)
    emitter.emit("foo", 1, "2", payload)

    assert calls == [("foo", (1, "2", payload))]


def test_once_listener_sees_emitter_as_current(emitter):
    seen = []
    emitter.once("foo", lambda: seen.append(current_emitter()))
    emitter.emit("foo")

    assert seen == [emitter]


def test_once_returns_emitter(emitter, foo):
    assert emitter.once("foo", foo) is emitter


def test_once_emits_new_listener_with_original(emitter, foo):
    seen = []
    emitter.on(NEW_LISTENER, lambda *args: seen.append(args))
    seen.clear()

    emitter.once("foo", foo)

    assert seen == [("foo", foo)]


def test_once_preserves_order_among_persistent_listeners(emitter, foo, bar, calls):
    def baz(*args):
        calls.append(("baz", args))

    emitter.on("data", foo)
    emitter.once("data", bar)
    emitter.on("data", baz)

    emitter.emit("data", 42)
    emitter.emit("data", 43)

    assert calls == [
        ("foo", (42,)),
        ("bar", (42,)),
        ("baz", (42,)),
        ("foo", (43,)),
        ("baz", (43,)),
    ]


def test_once_same_listener_twice_is_consumed_together(emitter, foo, calls):
    emitter.once("foo", foo)
    emitter.once("foo", foo)
    emitter.emit("foo")

    # removal is by listener identity, so the first firing drops both entries
    assert calls == [("foo", ())]
    assert emitter.listeners("foo") == []


def test_once_listener_that_raises_stays_registered(emitter):
    def faulty():
        raise RuntimeError("handler failed")

    emitter.once("foo", faulty)

    with pytest.raises(RuntimeError):
        emitter.emit("foo")

    assert listener_count(emitter, "foo") == 1


def test_once_count_returns_to_previous_value(emitter, foo, bar):
    emitter.on("foo", bar)
    before = listener_count(emitter, "foo")

    emitter.once("foo", foo)
    assert listener_count(emitter, "foo") == before + 1

    emitter.emit("foo")
    assert listener_count(emitter, "foo") == before


def test_once_wrapper_is_callable_directly(emitter, calls):
    def foo(*args):
        calls.append((current_emitter(), args))

    emitter.once("foo", foo)
    wrapper = emitter.listeners("foo")[0]

    wrapper("direct")

    assert calls == [(emitter, ("direct",))]
    assert current_emitter() is None
    assert emitter.listeners("foo") == []
