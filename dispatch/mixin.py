"""
Event Dispatch Mixin

Add EventDispatchMixin as a base class and the host gains
add_handler_for_event() and invoke_event().

Handlers are called as handler(host, *args). Return a truthy value to be
called again on the next event, or a falsy value for a one-off handler.

A single event name is reserved: 'event_error'. Whenever another handler
raises, the 'event_error' handlers are invoked with the exception. If no
'event_error' handler exists, or an 'event_error' handler itself raises,
the error propagates to the caller of invoke_event().
"""

import logging

from . import config
from . import core

logger = logging.getLogger(__name__)


class EventDispatchMixin:
    """
    Mixin methods for simple event dispatch.

    The registry lives in self._event_handlers and is created on the first
    add_handler_for_event() call. Override event_handlers() and
    clear_event_handlers() together to keep it somewhere else.

    Methods named on_<event> are used as fallback handlers when nothing is
    registered for <event>:

        class Session(EventDispatchMixin):
            def on_login(self, user):
                print(f'{user} logged in')

        Session().invoke_event('login', 'fred')
    """

    def invoke_event(self, event, *args):
        """
        Invoke the handlers for an event.

        Args:
            event: Event name
            *args: Extra arguments passed to every handler

        Returns:
            self if a handler was found, None if not
        """
        return core.invoke_event(self, event, *args)

    def add_handler_for_event(self, *pairs):
        """
        Add handlers for the given events.

            self.add_handler_for_event(
                'new_message', lambda host, msg: print(msg) or True,
                'logout', lambda host: False,
            )

        Args:
            *pairs: Event name and callback, repeated

        Returns:
            self
        """
        return core.add_handler_for_event(self, *pairs)

    def event_handlers(self):
        """
        Accessor for the registry.

        Returns:
            dict: Event name -> list of handlers, or None before first use
        """
        return getattr(self, '_event_handlers', None)

    def clear_event_handlers(self):
        """Remove all handlers for all events."""
        self._event_handlers = {}
        logger.debug('Cleared event handlers on %r', self)
        return self

    def fallback_for_event(self, event):
        """Return the on_<event> method defined on the class, if any."""
        code = getattr(type(self), config.FALLBACK_PREFIX + event, None)
        return code if callable(code) else None
