"""
Logging utility module for the renderer.
"""

import logging
import os
import sys
import time
from typing import Optional
from datetime import datetime

# Define logging levels dictionary for easy reference
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

# Root of every module logger in the package
ROOT_LOGGER_NAME = "render_engine"


class LogFormatter(logging.Formatter):
    """Custom log formatter with colored output for console."""

    # ANSI color codes
    COLORS = {
        'RESET': '\033[0m',
        'RED': '\033[31m',
        'GREEN': '\033[32m',
        'YELLOW': '\033[33m',
        'BLUE': '\033[34m',
        'BOLD': '\033[1m'
    }

    # Level-specific colors
    LEVEL_COLORS = {
        'DEBUG': COLORS['BLUE'],
        'INFO': COLORS['GREEN'],
        'WARNING': COLORS['YELLOW'],
        'ERROR': COLORS['RED'],
        'CRITICAL': COLORS['RED'] + COLORS['BOLD']
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.

        Args:
            colored: Whether to use colored output
            *args: Additional formatter args
            **kwargs: Additional formatter kwargs
        """
        self.colored = colored and sys.platform != 'win32'  # Disable colors on Windows
        super().__init__(*args, **kwargs)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record.

        Args:
            record: Log record to format

        Returns:
            str: Formatted log message
        """
        formatted_msg = super().format(record)

        if self.colored:
            level_name = record.levelname
            if level_name in self.LEVEL_COLORS:
                colored_level = f"{self.LEVEL_COLORS[level_name]}{level_name}{self.COLORS['RESET']}"
                formatted_msg = formatted_msg.replace(level_name, colored_level, 1)

        return formatted_msg


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Set up logging for the renderer.

    Module loggers are created with ``logging.getLogger(__name__)`` and
    therefore sit below the ``render_engine`` logger configured here.

    Args:
        log_file: Path to log file (None for no file logging)
        console_level: Console logging level
        file_level: File logging level
        component: Optional component name for the logger

    Returns:
        logging.Logger: Configured logger
    """
    logger_name = ROOT_LOGGER_NAME
    if component:
        logger_name = f"{logger_name}.{component}"

    logger = logging.getLogger(logger_name)

    # If handlers already exist, assume logger is already configured
    if logger.handlers:
        return logger

    levels = [LOG_LEVELS.get(console_level, logging.INFO)]
    if log_file:
        levels.append(LOG_LEVELS.get(file_level, logging.DEBUG))
    logger.setLevel(min(levels))

    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVELS.get(console_level, logging.INFO))

    console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    console_formatter = LogFormatter(colored=True, fmt=console_format, datefmt='%H:%M:%S')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(LOG_LEVELS.get(file_level, logging.DEBUG))

        # File output is more detailed than console
        file_format = ("%(asctime)s [%(levelname)s] %(name)s "
                       "(%(filename)s:%(lineno)d): %(message)s")
        file_formatter = logging.Formatter(file_format, datefmt='%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


def get_default_log_file() -> str:
    """
    Get the default log file path.

    Returns:
        str: Default log file path
    """
    # ~/.wink_render/logs/wink_render_YYYY-MM-DD.log
    home_dir = os.path.expanduser("~")
    log_dir = os.path.join(home_dir, ".wink_render", "logs")

    date_str = datetime.now().strftime("%Y-%m-%d")
    return os.path.join(log_dir, f"wink_render_{date_str}.log")


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Message to log with the exception
    """
    exc_info = (type(exception), exception, exception.__traceback__)
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """Utility class for timing pipeline stages."""

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.

        Args:
            logger: Logger to use
            component: Component name
        """
        self.logger = logger
        self.component = component
        self.start_times = {}

    def start(self, name: str) -> None:
        """
        Start timing an operation.

        Args:
            name: Operation name
        """
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        End timing an operation and log the duration.

        Args:
            name: Operation name
            level: Log level

        Returns:
            float: Duration in seconds
        """
        if name not in self.start_times:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - self.start_times.pop(name)
        self.log(name, duration, level)

        return duration

    def log(self, name: str, duration: float, level: str = "DEBUG") -> None:
        """
        Log a duration.

        Args:
            name: Operation name
            duration: Duration in seconds
            level: Log level
        """
        log_func = getattr(self.logger, level.lower())
        log_func(f"{self.component} {name} took {duration:.4f} seconds")

    def clear(self) -> None:
        """Clear all start times."""
        self.start_times.clear()
