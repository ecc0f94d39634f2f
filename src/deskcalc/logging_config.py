"""
Logging Configuration
Attaches console (and optionally file) output to the 'deskcalc' logger.
"""
import logging
import sys
from typing import List, Optional

LOGGER_NAME = "deskcalc"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger and return it.

    Args:
        level: Logging level applied to the logger and all of its handlers.
        log_file: If given, buffer changes and evaluation failures are also
            written there (the file is truncated on every start).
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # main() may run twice in one process (tests); never stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging initialized ({len(handlers)} handler(s)).")
    return logger
