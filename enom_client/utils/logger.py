"""
Centralized logging configuration with colored output

Module loggers are children of the ``enom_client`` package logger, which owns
the handlers. Console output is always on; a log file is only written when
one is asked for through ``configure_logging`` (or ``ENOM_LOG_FILE``).
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import colorlog


PACKAGE_LOGGER = "enom_client"

LOGS_DIR = Path("logs")


def setup_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None,
    console: bool = True
) -> logging.Logger:
    """
    Set up a logger with colored console output and optional file logging.
    Calling it again replaces the logger's handlers.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (saved in logs/ directory)
        console: Whether to output to console

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        console_handler = colorlog.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, level.upper()))

        console_formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-8s%(reset)s %(blue)s[%(name)s]%(reset)s %(message)s",
            reset=True,
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            },
            style='%'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_file:
        LOGS_DIR.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(LOGS_DIR / log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file

        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger every enom_client module reports through.

    Args:
        level: Logging level
        log_file: Optional log file name under logs/. No file is written if None.

    Returns:
        The package logger
    """
    return setup_logger(PACKAGE_LOGGER, level=level, log_file=log_file)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger, giving the package logger console output on first use.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Optional level for this logger only

    Returns:
        Logger instance
    """
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()

    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper()))

    return logger
