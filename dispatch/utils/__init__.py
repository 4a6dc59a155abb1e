"""
Utility functions for event dispatch
"""

from .helpers import handlers_from_options, setup_logging
from .event_bus import EventBus

__all__ = ['handlers_from_options', 'setup_logging', 'EventBus']
