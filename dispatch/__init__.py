"""
Dispatch - synchronous named-event dispatch for any host object
"""

from .core import (
    DispatchHost, FallbackProvider,
    add_handler_for_event, invoke_event, handler_name
)
from .errors import DispatchError, UnhandledHandlerError
from .mixin import EventDispatchMixin

__all__ = [
    'DispatchHost', 'FallbackProvider',
    'add_handler_for_event', 'invoke_event', 'handler_name',
    'DispatchError', 'UnhandledHandlerError',
    'EventDispatchMixin'
]
