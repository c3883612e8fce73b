"""
wxunpack Logger - Centralized Logging Utility
"""
import logging
import sys


def setup_logger():
    logger = logging.getLogger("wxunpack")
    logger.setLevel(logging.DEBUG)

    c_handler = logging.StreamHandler(sys.stdout)
    c_handler.setLevel(logging.INFO)

    c_format = logging.Formatter('%(message)s') # Clean output for CLI
    c_handler.setFormatter(c_format)

    if not logger.handlers:
        logger.addHandler(c_handler)

    return logger


def set_verbose(verbose: bool = True):
    """Lower the console handler to DEBUG so pipeline steps are printed"""
    level = logging.DEBUG if verbose else logging.INFO
    for handler in logger.handlers:
        handler.setLevel(level)


# Initialize singleton
logger = setup_logger()

__all__ = ["logger", "set_verbose"]
