import types as _types

from importlib import import_module
from typing import TYPE_CHECKING

from .core.entries import OnceWrapper
from .core.events import NEW_LISTENER, REMOVE_LISTENER, EventEmitter, listener_count
from .core.utils import current_emitter
from .exceptions import EmitterError, InvalidListenerError

__all__: list[str] = [
    "EventEmitter",
    "OnceWrapper",
    "NEW_LISTENER",
    "REMOVE_LISTENER",
    "current_emitter",
    "listener_count",
    "EmitterError",
    "InvalidListenerError",
    "observers",
]


def __getattr__(name: str) -> _types.ModuleType:
    if name == "observers":
        mod = import_module(f"{__name__}.observers")
        globals()[name] = mod
        return mod
    raise AttributeError(name)


if TYPE_CHECKING:  # pragma: no cover
    from . import observers  # noqa: F401
