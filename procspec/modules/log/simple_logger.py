"""
Shared logging utilities for procspec components.
"""
import logging

from procspec.config import get_log_level


def get_logger(service_name, context=None):
    """
    Get a logger instance for a procspec component.

    Args:
        service_name: Name of the component, used as the logger name
        context: Optional dict of extra information attached to every record

    Returns:
        logging.Logger or logging.LoggerAdapter: Logger instance
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(get_log_level())
    if context:
        return logging.LoggerAdapter(logger, context)
    return logger
