"""
Helper utility functions for event dispatch
"""

import logging

from .. import config


def handlers_from_options(options):
    """
    Collect on_<event> callbacks from keyword options.

    Lets a host accept handlers as constructor arguments:

        def configure(self, **options):
            self.add_handler_for_event(*handlers_from_options(options))

    Args:
        options: Mapping of option name to value

    Returns:
        list: Flat [event, callback, event, callback, ...] in option order
    """
    pairs = []
    prefix = config.FALLBACK_PREFIX
    for name, code in options.items():
        if name.startswith(prefix) and len(name) > len(prefix):
            pairs.extend((name[len(prefix):], code))
    return pairs


def setup_logging(level=None):
    """
    Send dispatch log records to the console.

    Args:
        level: Logging level, defaults to config.LOG_LEVEL

    Returns:
        logging.Logger: The configured 'dispatch' logger
    """
    logger = logging.getLogger('dispatch')
    logger.setLevel(config.LOG_LEVEL if level is None else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
        )
        logger.addHandler(handler)
    return logger
