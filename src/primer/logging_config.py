"""
Logging Configuration
Sets up the package logger. Diagnostics go to stderr so stdout carries
only the transcript.
"""
import logging
import sys
from typing import Optional, Union


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'primer' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, or a name such as "INFO")
        log_file: Optional path to save logs to a file.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger("primer")
    logger.setLevel(level)

    # Repeated calls (tests, several CLI runs in one process) must not stack handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
