"""Errors raised by the event emitter."""


class EventEmitterError(Exception):
    """Base class for all errors raised by `eventemitter`."""


class InvalidArgumentError(EventEmitterError, TypeError):
    """
    A listener was registered with an argument that cannot be used.

    Raised synchronously by `EventEmitter.on` and `EventEmitter.once` when the
    listener is not callable. Subclasses `TypeError` so callers can catch
    either.
    """
