"""Helpers for `Event`-like envelopes passed by `EventEmitter.emit_with_event`."""
from collections.abc import Mapping
from typing import Any, Hashable


def is_event_like(value: Any) -> bool:
    """
    Whether a value looks like a browser `Event`, i.e. carries a `type`.

    Mappings are event-like when they hold a `"type"` key, any other object
    when it exposes a `type` attribute. Strings and symbols are never
    event-like.

    Args:
        value (Any): Value to inspect

    Returns:
        bool: Whether `value` can be used as an envelope
    """
    if isinstance(value, (str, bytes)):
        return False

    if isinstance(value, Mapping):
        return "type" in value

    return hasattr(value, "type")


def event_type(envelope: Any) -> Hashable:
    """
    Read the event name carried by an envelope.

    Args:
        envelope (Any): Event-like value, see `is_event_like`

    Returns:
        Hashable: The envelope's `type`
    """
    if isinstance(envelope, Mapping):
        return envelope["type"]

    return envelope.type


def make_event(event: Hashable) -> dict:
    """Build the minimal envelope `{"type": event}` for a plain event name."""
    return {"type": event}
