"""Opaque, unique event name tokens."""
from typing import Optional


class Symbol:
    """
    A unique token that can be used as an event name.

    Two symbols are never equal, even when they share a description. Use a
    symbol when an event name must not collide with any string name.

    >>> READY = Symbol("ready")
    >>> emitter.on(READY, on_ready)
    >>> emitter.emit(READY)
    """

    __slots__ = ("_description",)

    def __init__(self, description: Optional[str] = None):
        """
        Create a new unique symbol.

        Args:
            description (str, optional): Label shown in `repr`. Defaults to None.
        """
        self._description = description

    @property
    def description(self) -> Optional[str]:
        """Label given when the symbol was created."""
        return self._description

    def __repr__(self) -> str:
        if self._description is None:
            return "Symbol()"

        return f"Symbol({self._description})"
