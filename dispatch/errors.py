"""
Dispatch Errors
"""

from . import config


class DispatchError(Exception):
    """Base class for errors raised by the dispatcher itself."""


class UnhandledHandlerError(DispatchError):
    """
    A handler failed and nothing was registered for the error event.

    Attributes:
        event: Name of the event whose handler failed
        original: The exception the handler raised
    """

    def __init__(self, event, original):
        self.event = event
        self.original = original
        super().__init__(
            f'{original} and no {config.ERROR_EVENT} handler found'
        )
