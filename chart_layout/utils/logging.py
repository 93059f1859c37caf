"""
Logging setup for the layout engine.
Layout decisions (degenerate boxes, skipped declarations, fallbacks) are logged
under the ``chart_layout`` logger; this module configures where they go.
"""

import contextlib
import logging
import os
import sys
import time
from typing import Dict, Iterator, Optional

ROOT_LOGGER_NAME = "chart_layout"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

_RESET = '\033[0m'
_LEVEL_COLORS = {
    logging.DEBUG: '\033[34m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[1;31m',
}


def _level(name: str, default: int) -> int:
    return LOG_LEVELS.get(name.upper(), default) if name else default


class LogFormatter(logging.Formatter):
    """Formatter that colors the level name on terminals."""

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Args:
            colored: Whether to color level names; always off on Windows
            *args: Passed to logging.Formatter
            **kwargs: Passed to logging.Formatter
        """
        super().__init__(*args, **kwargs)
        self.colored = colored and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno)
        if not self.colored or color is None:
            return text
        return text.replace(record.levelname, f"{color}{record.levelname}{_RESET}", 1)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(LogFormatter(colored=True, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def _file_handler(log_file: str, level: int) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    handler = logging.FileHandler(log_file)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "WARNING",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``chart_layout`` logger, or ``chart_layout.<component>``.

    Calling it again for a logger that already has handlers changes nothing,
    so the package can call it at import and applications can still call it
    first with their own settings.

    Args:
        log_file: Optional file to log to as well
        console_level: Level name for the console
        file_level: Level name for the log file
        component: Optional child logger name

    Returns:
        The configured logger
    """
    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    console = _level(console_level, logging.WARNING)
    handlers = [_console_handler(console)]
    if log_file:
        handlers.append(_file_handler(log_file, _level(file_level, logging.DEBUG)))

    # Let records through to whichever handler wants the most detail
    logger.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        logger.addHandler(handler)

    return logger


class PerformanceLogger:
    """Times named steps of a layout pass and logs how long they took."""

    def __init__(self, logger: logging.Logger, component: str):
        """
        Args:
            logger: Logger to report to
            component: Name prefixed to every timing message
        """
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop timing ``name`` and log the duration.

        Args:
            name: Step name passed to start()
            level: Level name to log at

        Returns:
            Duration in seconds, 0.0 if the step was never started
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - started
        self._report(name, duration, level)
        return duration

    def _report(self, name: str, duration: float, level: str) -> None:
        self.logger.log(_level(level, logging.DEBUG), f"{self.component} {name} took {duration:.4f} seconds")

    @contextlib.contextmanager
    def measure(self, name: str, level: str = "DEBUG") -> Iterator[None]:
        """
        Time the body of a ``with`` block as step ``name``.

        The start time stays local to the block, so concurrent or nested
        blocks with the same name do not interfere.
        """
        started = time.perf_counter()
        try:
            yield
        finally:
            self._report(name, time.perf_counter() - started, level)
