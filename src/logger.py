"""
Logging for PV Organizer
Colored console output shared by the engine, the thumbnail worker and the UI
"""

import logging
import os
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps each record in an ANSI color for its level"""

    COLORS = {
        logging.DEBUG: '\033[36m',    # Cyan
        logging.INFO: '\033[32m',     # Green
        logging.WARNING: '\033[33m',  # Yellow
        logging.ERROR: '\033[31m',    # Red
        logging.CRITICAL: '\033[35m'  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, *args, use_colors: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self._use_colors = use_colors

    def format(self, record):
        formatted = super().format(record)
        if self._use_colors:
            color = self.COLORS.get(record.levelno, '')
            if color:
                formatted = f"{color}{formatted}{self.RESET}"
        return formatted


class Logger:
    """Process-wide logger for PV Organizer"""

    _instance: Optional['Logger'] = None
    _logger: Optional[logging.Logger] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if self._logger is None:
            self._setup_logger()

    def _setup_logger(self):
        self._logger = logging.getLogger('PVOrg')
        self._logger.setLevel(logging.DEBUG)  # handlers do the filtering
        self._logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        formatter = ColoredFormatter(
            fmt='%(asctime)s [%(levelname)8s] %(name)s.%(module)s: %(message)s',
            datefmt='%H:%M:%S',
            use_colors=sys.stdout.isatty()
        )
        console_handler.setFormatter(formatter)

        env_level = os.environ.get('PVORG_LOG_LEVEL', '').upper()
        console_handler.setLevel(getattr(logging, env_level, logging.INFO) if env_level else logging.INFO)

        self._logger.addHandler(console_handler)
        self._console_handler = console_handler

    def set_level(self, level: str):
        """Set the console log level, PVORG_LOG_LEVEL wins if it is set"""
        if os.environ.get('PVORG_LOG_LEVEL'):
            level = os.environ['PVORG_LOG_LEVEL']
        log_level = getattr(logging, level.upper(), logging.INFO)
        self._console_handler.setLevel(log_level)
        self.debug(f"Log level set to {logging.getLevelName(log_level)}")

    def debug(self, message: str, *args, **kwargs):
        self._logger.debug(message, *args, stacklevel=3, **kwargs)

    def info(self, message: str, *args, **kwargs):
        self._logger.info(message, *args, stacklevel=3, **kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._logger.warning(message, *args, stacklevel=3, **kwargs)

    def error(self, message: str, *args, **kwargs):
        self._logger.error(message, *args, stacklevel=3, **kwargs)

    def critical(self, message: str, *args, **kwargs):
        self._logger.critical(message, *args, stacklevel=3, **kwargs)


# Global logger instance
logger = Logger()


def set_log_level(level: str):
    logger.set_level(level)


def debug(message: str, *args, **kwargs):
    logger.debug(message, *args, **kwargs)


def info(message: str, *args, **kwargs):
    logger.info(message, *args, **kwargs)


def warning(message: str, *args, **kwargs):
    logger.warning(message, *args, **kwargs)


def error(message: str, *args, **kwargs):
    logger.error(message, *args, **kwargs)


def critical(message: str, *args, **kwargs):
    logger.critical(message, *args, **kwargs)
