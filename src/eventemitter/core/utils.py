from __future__ import annotations

import contextlib
import contextvars

from typing import TYPE_CHECKING, Any, Iterator

from ..exceptions import InvalidListenerError

if TYPE_CHECKING:  # pragma: no cover
    from .events import EventEmitter

# Emitter whose listener is currently running in this context.
_current: contextvars.ContextVar["EventEmitter | None"] = contextvars.ContextVar(
    "_current_emitter", default=None
)


def current_emitter() -> "EventEmitter | None":
    """Return the emitter dispatching to the running listener.

    ``None`` outside of a dispatch.  Nested dispatches see the innermost
    emitter and the outer one is restored when they return.
    """
    return _current.get()


@contextlib.contextmanager
def dispatching(emitter: "EventEmitter") -> Iterator[None]:
    token = _current.set(emitter)
    try:
        yield
    finally:
        _current.reset(token)


def ensure_listener(listener: Any) -> None:
    """Raise :class:`InvalidListenerError` unless *listener* is callable."""
    if not callable(listener):
        raise InvalidListenerError(listener)
