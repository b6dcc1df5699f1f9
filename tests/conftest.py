import pytest

from eventemitter import EventEmitter


@pytest.fixture
def emitter() -> EventEmitter:
    """Provides a fresh EventEmitter for each test."""
    return EventEmitter(name="test")


@pytest.fixture
def calls() -> list:
    """Shared call log; listeners append ``(label, args)`` tuples."""
    return []


@pytest.fixture
def foo(calls):
    def foo(*args):
        calls.append(("foo", args))

    return foo


@pytest.fixture
def bar(calls):
    def bar(*args):
        calls.append(("bar", args))

    return bar
