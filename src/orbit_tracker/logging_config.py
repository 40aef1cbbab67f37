"""
Logging configuration for the tracker.

Library modules only call logging.getLogger(__name__); entry points call
configure_logging() once.

Usage:
    from orbit_tracker.logging_config import configure_logging

    configure_logging(logging.DEBUG)
"""

import logging
import sys
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Parameters
    ----------
    level : int
        Logging level (e.g., logging.DEBUG, logging.INFO)
    log_file : str, optional
        Path to log file. If None, logs only to console.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
