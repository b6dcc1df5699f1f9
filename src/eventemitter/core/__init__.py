from .entries import OnceWrapper
from .events import NEW_LISTENER, REMOVE_LISTENER, EventEmitter, listener_count
from .utils import current_emitter

__all__ = [
    "EventEmitter",
    "OnceWrapper",
    "NEW_LISTENER",
    "REMOVE_LISTENER",
    "current_emitter",
    "listener_count",
]
