"""
Logging setup for applications that embed ellipsoidmesh.

The library only emits records through ``logging.getLogger(__name__)``; it
never installs handlers on import. Call ``setup_logging`` from the host
application to see them.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "ellipsoidmesh"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'ellipsoidmesh' logger namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG to trace every grid fill)
        log_file: Optional path to also write records to.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Repeated calls replace handlers instead of stacking them
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
