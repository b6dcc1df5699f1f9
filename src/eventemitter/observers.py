from __future__ import annotations

import logging

from typing import Any, Callable, Hashable

from .core.events import NEW_LISTENER, REMOVE_LISTENER, EventEmitter

_LOG = logging.getLogger(__name__)


class LifecycleLogger:
    """Subscribe to an emitter's *newListener* / *removeListener* and log a one-liner."""

    def __init__(self, emitter: EventEmitter, *, level: int = logging.INFO) -> None:
        self._emitter = emitter
        self._level = level
        # Keep the unsubscribe callbacks so close() can detach
        self._unsubs: list[Callable[[], None]] = [
            emitter.subscribe(NEW_LISTENER, self._on_new_listener),
            emitter.subscribe(REMOVE_LISTENER, self._on_remove_listener),
        ]

    def _on_new_listener(self, event: Hashable, listener: Any) -> None:
        self._log("+", event, listener)

    def _on_remove_listener(self, event: Hashable, listener: Any) -> None:
        self._log("-", event, listener)

    def _log(self, sign: str, event: Hashable, listener: Any) -> None:
        name = getattr(listener, "__qualname__", None) or repr(listener)
        _LOG.log(
            self._level,
            "[%s] %s %-20r %s  (now %d)",
            self._emitter.name or "emitter",
            sign,
            event,
            name,
            EventEmitter.listener_count(self._emitter, event),
        )

    def close(self) -> None:
        """Detach the logger so it stops reporting."""
        unsubs, self._unsubs = self._unsubs, []
        for unsub in unsubs:
            unsub()
