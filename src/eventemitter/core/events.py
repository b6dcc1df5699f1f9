from __future__ import annotations

import itertools
import logging
import threading

from types import TracebackType
from typing import Any, Callable, Hashable

from .entries import Listener, OnceWrapper, entry_matches
from .utils import dispatching, ensure_listener

_LOG = logging.getLogger(__name__)

NEW_LISTENER = "newListener"
REMOVE_LISTENER = "removeListener"

_ALL: Any = object()


class EventEmitter:
    """Synchronous, per-instance event emitter.

    • ``emit()`` blocks until every listener returns, in registration order.
    • Exceptions raised by listeners **propagate** to the caller and stop
      the remaining listeners of that dispatch.
    • Event keys are any hashable value.
    """

    def __init__(self, *, name: str | None = None) -> None:
        self.name = name
        self._events: dict[Hashable, list[Listener]] = {}
        # one token per registration, parallel to _events
        self._tokens: dict[Hashable, list[int]] = {}
        self._seq = itertools.count()
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        with self._lock:
            count = sum(len(entries) for entries in self._events.values())
        return f"<EventEmitter{label} events={len(self._events)} listeners={count}>"

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def on(self, event: Hashable, listener: Listener) -> "EventEmitter":
        """Append *listener* to *event* and announce it on ``newListener``."""
        ensure_listener(listener)
        self._append(event, listener)
        self.emit(NEW_LISTENER, event, listener)
        return self

    add_listener = on

    def once(self, event: Hashable, listener: Listener) -> "EventEmitter":
        """Register *listener* for the next dispatch of *event* only.

        ``newListener`` receives the original *listener*, not the wrapper
        stored in the registry.
        """
        ensure_listener(listener)

        # a listener that raises stays registered
        def _fire(*args: Any) -> Any:
            with dispatching(self):
                result = listener(*args)
            self.remove_listener(event, listener)
            return result

        self._append(event, OnceWrapper(outer=_fire, listener=listener))
        self.emit(NEW_LISTENER, event, listener)
        return self

    def subscribe(self, event: Hashable, listener: Listener) -> Callable[[], None]:
        """Register *listener* for *event*.

        Returns a zero-argument function that **unsubscribes** it again.
        """
        self.on(event, listener)

        def _unsubscribe() -> None:
            self.remove_listener(event, listener)

        return _unsubscribe

    def _append(self, event: Hashable, entry: Listener) -> None:
        with self._lock:
            self._events.setdefault(event, []).append(entry)
            self._tokens.setdefault(event, []).append(next(self._seq))
        _LOG.debug("Subscribed %r to event %r", entry, event)

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------
    def remove_listener(self, event: Hashable, listener: Listener) -> "EventEmitter":
        """Drop every entry of *event* registered for *listener*.

        ``removeListener`` is emitted even when nothing matched.
        """
        ensure_listener(listener)
        with self._lock:
            entries = self._events.get(event)
            removed = 0
            if entries:
                tokens = self._tokens[event]
                kept = [(e, t) for e, t in zip(entries, tokens) if not entry_matches(e, listener)]
                removed = len(entries) - len(kept)
                # in place: listeners() hands out the live list
                entries[:] = [e for e, _ in kept]
                tokens[:] = [t for _, t in kept]
        if removed:
            _LOG.debug("Unsubscribed %r from event %r (%d entries)", listener, event, removed)
        self.emit(REMOVE_LISTENER, event, listener)
        return self

    off = remove_listener

    def remove_all_listeners(self, event: Hashable = _ALL) -> "EventEmitter":
        """Forget *event* entirely, or every event when called bare.

        Bulk removal does not emit ``removeListener``.
        """
        with self._lock:
            if event is _ALL:
                self._events.clear()
                self._tokens.clear()
            else:
                self._events.pop(event, None)
                self._tokens.pop(event, None)
        _LOG.debug("Removed all listeners for %s", "every event" if event is _ALL else repr(event))
        return self

    def reset(self) -> None:
        """Remove **all** listeners (used on context-manager exit)."""
        self.remove_all_listeners()

    # ------------------------------------------------------------------
    # Dispatch / introspection
    # ------------------------------------------------------------------
    def emit(self, event: Hashable, *args: Any) -> bool:
        """Fire *event*, forwarding *args* positionally to each listener.

        Returns ``False`` when *event* has no listeners.  The listener list is
        copied first, so listeners may add or remove entries on the same
        event; an entry removed mid-dispatch is skipped, and so is one
        registered again after its removal.
        """
        with self._lock:
            snapshot = list(zip(self._events.get(event, ()), self._tokens.get(event, ())))
        if not snapshot:
            return False

        _LOG.debug("Emitting %r to %d listeners", event, len(snapshot))
        with dispatching(self):
            for entry, token in snapshot:
                if self._is_registered(event, token):
                    entry(*args)
        return True

    def _is_registered(self, event: Hashable, token: int) -> bool:
        with self._lock:
            return token in self._tokens.get(event, ())

    def listeners(self, event: Hashable) -> list[Listener]:
        """Return the live entry list for *event* (empty list if unset).

        One-shot entries show up as :class:`OnceWrapper` objects.
        """
        with self._lock:
            return self._events.get(event, [])

    @staticmethod
    def listener_count(instance: Any, event: Hashable) -> int:
        """Count *instance*'s listeners for *event*; ``0`` for non-emitters."""
        if not isinstance(instance, EventEmitter):
            return 0
        with instance._lock:
            return len(instance._events.get(event, ()))

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------
    def __enter__(self) -> "EventEmitter":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.reset()
        return False


listener_count = EventEmitter.listener_count
