"""
ordfns logging namespace.

The library never installs handlers; it only logs under the ``ordfns``
namespace (unsupported shapes at DEBUG, precision loss at WARNING when
enabled). Applications route those records with their own logging setup.

Usage:
    from ordfns.logging_config import get_logger

    logger = get_logger(__name__)
"""

import logging


ROOT_LOGGER_NAME = "ordfns"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the ordfns namespace.

    Args:
        name: Logger name, typically __name__

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
