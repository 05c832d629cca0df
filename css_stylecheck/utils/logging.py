"""Logging utility for CSS Stylecheck."""

import logging
import os
import sys
from typing import Optional
from .config import LOG_FORMAT, LOG_DATE_FORMAT

def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        verbose: Log at debug level instead of warning level
        log_file: Optional file that receives a copy of every record
    """
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

def get_logger(name):
    """Get a logger instance for the specified module.

    Args:
        name: Name of the module

    Returns:
        Logger instance
    """
    return logging.getLogger(name)

# Exported functions
__all__ = ['setup_logging', 'get_logger']
