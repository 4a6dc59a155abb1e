"""
Dispatch Core

Synchronous named-event dispatch over any object that owns a handler
registry. Handlers run immediately, in registration order, on the
caller's stack. A handler returning a falsy value is removed after the
run; a handler that raises is reported through the error event and
removed as well.
"""

import logging
from typing import Protocol, runtime_checkable

from . import config
from .errors import UnhandledHandlerError

logger = logging.getLogger(__name__)


@runtime_checkable
class DispatchHost(Protocol):
    """
    Anything that owns a handler registry.

    event_handlers() returns a mapping of event name to a list of handlers,
    or None before the first clear_event_handlers() call.
    """

    def event_handlers(self): ...

    def clear_event_handlers(self): ...


@runtime_checkable
class FallbackProvider(Protocol):
    """Hosts that can supply a handler for events with nothing registered."""

    def fallback_for_event(self, event): ...


def handler_name(code):
    """
    Readable name for a handler, used in log messages.

    Args:
        code: Handler callable

    Returns:
        str: Qualified name if the callable has one, else its repr
    """
    name = getattr(code, '__qualname__', None) or getattr(code, '__name__', None)
    return name if name else repr(code)


def add_handler_for_event(host, *pairs):
    """
    Append handlers to the registry of a host.

    Args:
        host: DispatchHost to register on
        *pairs: Flat sequence of event name, callback, event name, callback...

    Returns:
        The host, for chaining
    """
    if len(pairs) % 2:
        raise ValueError('add_handler_for_event expects (event, callback) pairs')

    pairs = list(zip(pairs[0::2], pairs[1::2]))
    for event, code in pairs:
        if not isinstance(event, str) or not event:
            raise ValueError(f'Event name must be a non-empty string, got {event!r}')
        if not callable(code):
            raise TypeError(f'Handler for {event!r} is not callable: {code!r}')

    # Only initialise once; an existing registry must never be wiped here
    if host.event_handlers() is None:
        host.clear_event_handlers()

    handlers = host.event_handlers()
    for event, code in pairs:
        handlers.setdefault(event, []).append(code)
        logger.debug('Added handler %s for event %r', handler_name(code), event)
    return host


def invoke_event(host, event, *args):
    """
    Run the handlers for an event.

    Registered handlers take priority. If none are registered, the host's
    fallback handler (see FallbackProvider) runs instead.

    Args:
        host: DispatchHost the event is invoked on
        event: Event name
        *args: Passed unchanged to every handler after the host

    Returns:
        The host if a handler ran, None if the event went unhandled
    """
    handlers = host.event_handlers()
    queued = handlers.get(event) if handlers else None

    if queued:
        # Handlers may register, clear or invoke while we run, so iterate
        # over the list as it was when the event came in
        snapshot = list(queued)
        finished = []
        try:
            for code in snapshot:
                if _run_handler(host, code, event, args):
                    finished.append(code)
        finally:
            # Handlers that already finished stay removed even if a later
            # one raises out of the run
            if finished:
                _remove_handlers(host, event, finished)
        return host

    fallback = None
    if isinstance(host, FallbackProvider):
        fallback = host.fallback_for_event(event)
    if fallback is not None:
        _run_handler(host, fallback, event, args)
        return host

    logger.debug('No handler for event %r', event)
    return None


def _run_handler(host, code, event, args):
    """Run one handler. Returns True if it should be removed afterwards."""
    try:
        return not code(host, *args)
    except Exception as exc:
        if event == config.ERROR_EVENT:
            raise
        logger.warning(
            'Handler %s for event %r failed: %s', handler_name(code), event, exc
        )
        if invoke_event(host, config.ERROR_EVENT, exc) is None:
            raise UnhandledHandlerError(event, exc) from exc
        # A handler that raised is assumed broken
        return True


def _remove_handlers(host, event, finished):
    """Drop one live occurrence of each finished handler, matched by identity."""
    handlers = host.event_handlers()
    if not handlers or event not in handlers:
        return

    live = handlers[event]
    for code in finished:
        for index, queued in enumerate(live):
            if queued is code:
                del live[index]
                break

    if not live:
        del handlers[event]
