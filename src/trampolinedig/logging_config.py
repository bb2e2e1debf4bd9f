"""
Logging Configuration
Sets up the global logger for the application.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configures the root logger for the 'trampolinedig' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        stream: Console stream, stdout when omitted. The CLI passes stderr so
            that the printed report is the only thing on stdout.
    """
    logger = logging.getLogger("trampolinedig")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs when the CLI runs twice in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    # Console (stderr when driven by the CLI)
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # Optional copy of the log on disk
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
