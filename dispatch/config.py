"""
Event Dispatch Configuration Parameters
"""

import logging

# Dispatch
ERROR_EVENT = 'event_error'  # reserved event for reporting handler failures
FALLBACK_PREFIX = 'on_'  # on_<event> methods act as fallback handlers

# Logging
LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
