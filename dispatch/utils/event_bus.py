"""
Event Bus

Standalone dispatch point for components that share events without each
becoming a dispatch host. invoke_event() calls handlers immediately in
registration order; no queues, no threads.
"""

from ..mixin import EventDispatchMixin


class EventBus(EventDispatchMixin):
    """
    Instantiable host with no state beyond its handler registry.

    Handlers registered on a bus receive the bus as their first argument.
    """
