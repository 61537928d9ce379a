"""Representation of a single event listener."""
from typing import Any, Callable, NamedTuple


class Listener(NamedTuple):
    """
    A registered listener.

    Args:
        fn (Callable): Function invoked when the event is emitted
        context (Any): Owner the listener was registered with
        once (bool, optional): Whether the listener is removed before its first
                               invocation. Defaults to False.
    """

    fn: Callable[..., Any]
    context: Any
    once: bool = False
