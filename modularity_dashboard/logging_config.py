"""
Logging setup for the Modularization Dashboard.

Progress is logged to stderr under the ``modularity_dashboard`` logger so it
never mixes with the Maven output the tool runs alongside. Level names are
coloured only when stderr is a terminal.
"""

import copy
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = 'modularity_dashboard'

LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
RESET = '\033[0m'

BRIEF_FORMAT = '%(levelname)s - %(message)s'
DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name of each record."""

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelname)
        if self.use_color and color:
            # Other handlers format the same record
            record = copy.copy(record)
            record.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(record)


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def setup_logging(level: str = "INFO", log_file: Optional[str] = None, verbose: bool = False,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the dashboard logger.

    Args:
        level: Console logging level name
        log_file: Optional file that receives every record at DEBUG
        verbose: Lower the console level to DEBUG and use the detailed format
        stream: Console stream, stderr by default

    Returns:
        The ``modularity_dashboard`` logger
    """
    console_level = getattr(logging, level.upper(), logging.INFO)
    if verbose:
        console_level = logging.DEBUG
    stream = stream or sys.stderr

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file else console_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColoredFormatter(
        DETAILED_FORMAT if verbose else BRIEF_FORMAT,
        use_color=_is_terminal(stream),
    ))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for one component, e.g. ``get_logger('inspector')``."""
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
