"""Logging setup."""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure root logging for scripts and return the package logger.

    Args:
        level: Logging level
        log_file: Optional log file path, written in addition to stdout

    Returns:
        The mcts_engine logger
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    logger = logging.getLogger("mcts_engine")
    logger.setLevel(level)
    return logger
