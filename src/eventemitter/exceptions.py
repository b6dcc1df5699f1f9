class EmitterError(Exception):
    """Base class for errors raised by :mod:`eventemitter`."""


class InvalidListenerError(EmitterError, TypeError):
    """A listener argument was not callable."""

    def __init__(self, listener: object) -> None:
        super().__init__(f"listener should be callable, got {type(listener).__name__}")
        self.listener = listener
