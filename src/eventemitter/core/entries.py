from __future__ import annotations

import inspect

from dataclasses import dataclass, field
from typing import Any, Callable

Listener = Callable[..., Any]


def same_listener(a: Any, b: Any) -> bool:
    """Identity test that also treats two bound-method objects as the same
    listener when they bind the same function to the same instance."""
    if a is b:
        return True
    return (
        inspect.ismethod(a)
        and inspect.ismethod(b)
        and a.__self__ is b.__self__
        and a.__func__ is b.__func__
    )


@dataclass(frozen=True, slots=True, eq=False)
class OnceWrapper:
    """Registry entry for a listener added with ``once``.

    Attributes
    ----------
    outer
        Callable invoked by dispatch.  It runs *listener* and then removes
        it from the emitter.
    listener
        The callable the user registered.  Removal matches on it by
        identity, so ``remove_listener(event, fn)`` works for one-shot
        entries too.
    """

    outer: Listener = field(repr=False)
    listener: Listener

    def __call__(self, *args: Any) -> Any:
        return self.outer(*args)

    def matches(self, listener: Listener) -> bool:
        return same_listener(self.listener, listener)


def entry_matches(entry: Listener, listener: Listener) -> bool:
    """True when *entry* stands for *listener* (plain or one-shot)."""
    if same_listener(entry, listener):
        return True
    return isinstance(entry, OnceWrapper) and entry.matches(listener)
