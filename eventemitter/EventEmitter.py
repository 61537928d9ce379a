"""
An event system similar to Node's `EventEmitter`.

Copyright 2021

Permission is hereby granted, free of charge, to any person obtaining a copy of
this software and associated documentation files (the "Software"), to deal in
the Software without restriction, including without limitation the rights to
use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of
the Software, and to permit persons to whom the Software is furnished to do so,
subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS
FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR
COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER
IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

Listeners are registered against an event name (a `str` or a unique token
such as `Symbol`) and invoked synchronously, in registration order, when the
event is emitted.

>>> emitter = EventEmitter()
>>> emitter.on("tick", lambda n: print(n))
>>> emitter.emit("tick", 5)
5

`emit_with_event` additionally passes an `Event`-like envelope as the first
argument, similar to jQuery's `triggerHandler`:

>>> emitter.on("click", lambda event, x: print(event["type"], x))
>>> emitter.emit_with_event("click", 1)
click 1

Registrations and dispatches are logged at DEBUG through the `eventemitter`
logger. `eventemitter.Logging.Setup.configure_logger` prints them to stdout.
"""
import logging
from typing import Any, Callable, Hashable, Optional, Union

from eventemitter.Errors import InvalidArgumentError
from eventemitter.Listener import Listener
from eventemitter.Utils.EventLike import event_type, is_event_like, make_event

logger = logging.getLogger(__name__)

EventName = Hashable

# Marks an omitted listener in `on`/`once`
_MISSING = object()


class EventEmitter:
    """
    Listener registry and dispatcher.

    Can be used on its own or as a base class, in which case events are
    signalled by the subclass and listeners are invoked.

    Each entry of `_events` is either a single `Listener` or a list of two or
    more of them. A name is only present while it has listeners.
    """

    _events: dict[EventName, Union[Listener, list[Listener]]]
    _events_count: int

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._events = {}
        self._events_count = 0

    def event_names(self) -> list[EventName]:
        """
        List the events for which the emitter has registered listeners.

        String names come first, followed by any other tokens.

        Returns:
            list[EventName]: Event names, without duplicates
        """
        if self._events_count == 0:
            return []

        names = [name for name in self._events if isinstance(name, str)]
        tokens = [name for name in self._events if not isinstance(name, str)]

        return names + tokens

    def listeners(self, event: EventName) -> list[Callable[..., Any]]:
        """
        Return the listeners registered for a given event.

        Args:
            event (EventName): Event name

        Returns:
            list[Callable]: Registered functions, in registration order
        """
        handlers = self._events.get(event)

        if handlers is None:
            return []

        if isinstance(handlers, Listener):
            return [handlers.fn]

        return [handler.fn for handler in handlers]

    def listener_count(self, event: EventName) -> int:
        """Return the number of listeners listening to a given event."""
        handlers = self._events.get(event)

        if handlers is None:
            return 0

        if isinstance(handlers, Listener):
            return 1

        return len(handlers)

    def emit(self, event: EventName, *args: Any, **kwargs: Any) -> bool:
        """
        Call each of the listeners registered for a given event.

        Listeners registered while the event is being emitted are not called
        until the next emit. Listeners removed while it is being emitted are
        still called this time. Exceptions raised by a listener are not
        caught and stop the remaining listeners from being called.

        Args:
            event (EventName): Event name
            args (Any): Positional arguments passed to every listener
            kwargs (Any): Keyword arguments passed to every listener

        Returns:
            bool: Whether the event had listeners
        """
        return self._dispatch(event, args, kwargs)

    def emit_with_event(self, event: Any, *args: Any, **kwargs: Any) -> bool:
        """
        Call each of the listeners registered for a given event, passing an
        `Event`-like envelope as the first argument.

        If `event` is already event-like (see `is_event_like`) it is passed
        through as is and its `type` is the event name. Otherwise
        `{"type": event}` is passed.

        >>> emitter.on("save", lambda event, path: ...)
        >>> emitter.emit_with_event({"type": "save", "user": "me"}, "a.txt")

        Args:
            event (Any): Event name or event-like envelope
            args (Any): Arguments passed to every listener after the envelope
            kwargs (Any): Keyword arguments passed to every listener

        Returns:
            bool: Whether the event had listeners
        """
        if is_event_like(event):
            envelope = event
            event = event_type(envelope)
        else:
            envelope = make_event(event)

        return self._dispatch(event, (envelope, *args), kwargs)

    def _dispatch(self, event: EventName, args: tuple, kwargs: dict) -> bool:
        handlers = self._events.get(event)

        if handlers is None:
            logger.debug("Emitting '%s' with no listeners", event)
            return False

        if isinstance(handlers, Listener):
            handlers = (handlers,)
        else:
            handlers = tuple(handlers)

        logger.debug("Emitting '%s' to %d listener(s)", event, len(handlers))

        for handler in handlers:
            if handler.once:
                self.remove_listener(event, handler.fn, once=True)

            handler.fn(*args, **kwargs)

        return True

    def on(
        self,
        event: EventName,
        fn: Any = _MISSING,
        context: Any = None
    ):
        """
        Listen to an event.

        Can also be used as a decorator, in which case the decorated function
        is registered and returned unchanged.

        >>> @emitter.on("quit")
        >>> def on_quit():
        >>>     stop_event.set()

        Args:
            event (EventName): Event name
            fn (Callable, optional): Function executed when the event is emitted
            context (Any, optional): Owner of the listener, used to remove
                                     listeners by owner. Defaults to the emitter.

        Raises:
            InvalidArgumentError: `fn` is not callable

        Returns:
            EventEmitter: `self`, or a decorator when `fn` is omitted
        """
        if fn is _MISSING:
            return self._decorator(event, context, False)

        return self._add_listener(event, fn, context, False)

    def once(
        self,
        event: EventName,
        fn: Any = _MISSING,
        context: Any = None
    ):
        """
        Listen to an event a single time.

        The listener is removed right before it is called. Supports the same
        decorator syntax as `on`.

        Args:
            event (EventName): Event name
            fn (Callable, optional): Function executed when the event is emitted
            context (Any, optional): Owner of the listener. Defaults to the emitter.

        Raises:
            InvalidArgumentError: `fn` is not callable

        Returns:
            EventEmitter: `self`, or a decorator when `fn` is omitted
        """
        if fn is _MISSING:
            return self._decorator(event, context, True)

        return self._add_listener(event, fn, context, True)

    def _decorator(self, event: EventName, context: Any, once: bool):
        def decorator(func):
            self._add_listener(event, func, context, once)
            return func

        return decorator

    def _add_listener(
        self,
        event: EventName,
        fn: Callable[..., Any],
        context: Any,
        once: bool
    ) -> "EventEmitter":
        if not callable(fn):
            raise InvalidArgumentError("The listener must be callable")

        listener = Listener(fn, self if context is None else context, once)
        existing = self._events.get(event)

        if existing is None:
            self._events[event] = listener
            self._events_count += 1
        elif isinstance(existing, Listener):
            self._events[event] = [existing, listener]
        else:
            existing.append(listener)

        logger.debug("Added %slistener %r to '%s'", "one-time " if once else "", fn, event)

        return self

    def remove_listener(
        self,
        event: EventName,
        fn: Optional[Callable[..., Any]] = None,
        context: Any = None,
        once: bool = False
    ) -> "EventEmitter":
        """
        Remove the listeners of a given event.

        Without `fn` every listener of the event is removed. Otherwise only the
        listeners matching all the given filters are removed, the others keep
        their order.

        Args:
            event (EventName): Event name
            fn (Callable, optional): Only remove listeners of this function
            context (Any, optional): Only remove listeners with this owner
            once (bool, optional): Only remove one-time listeners. Defaults to False.

        Returns:
            EventEmitter: `self`
        """
        handlers = self._events.get(event)

        if handlers is None:
            return self

        if fn is None:
            self._clear_event(event)
            return self

        def matches(handler: Listener) -> bool:
            return (
                handler.fn == fn
                and (not once or handler.once)
                and (context is None or handler.context is context)
            )

        if isinstance(handlers, Listener):
            if matches(handlers):
                self._clear_event(event)
            return self

        remaining = [handler for handler in handlers if not matches(handler)]

        if len(remaining) == 0:
            self._clear_event(event)
        elif len(remaining) == 1:
            self._events[event] = remaining[0]
        else:
            self._events[event] = remaining

        logger.debug("Removed %d listener(s) %r from '%s'", len(handlers) - len(remaining), fn, event)

        return self

    def remove_all_listeners(self, event: Optional[EventName] = None) -> "EventEmitter":
        """
        Remove all listeners, or those of the specified event.

        Args:
            event (EventName, optional): Event name. Defaults to every event.

        Returns:
            EventEmitter: `self`
        """
        if event is not None:
            if event in self._events:
                self._clear_event(event)
        else:
            self._events = {}
            self._events_count = 0
            logger.debug("Removed all listeners")

        return self

    def _clear_event(self, event: EventName):
        self._events_count -= 1

        if self._events_count == 0:
            self._events = {}
        else:
            del self._events[event]

        logger.debug("Removed every listener from '%s'", event)

    # Aliases for familiarity with Node and jQuery
    add_listener = on
    off = remove_listener
    one = once
    trigger_handler = emit_with_event
