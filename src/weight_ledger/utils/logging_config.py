"""
Logging configuration and utilities.

Every CLI command calls setup_logging, so repeated setups in one process
replace and close the handlers of the previous one.
"""

import logging
import sys
from pathlib import Path

from weight_ledger.utils.parameters import LoggingConfig


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if config.console:
        # stderr keeps command output on stdout clean
        handlers.append(logging.StreamHandler(sys.stderr))

    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    return handlers


def setup_logging(config: LoggingConfig, logger_name: str | None = None) -> logging.Logger:
    """
    Set up logging for the application.

    Args:
        config: Logging configuration. Unknown level names fall back to INFO.
        logger_name: Optional logger name. If None, configures the root logger.

    Returns:
        Configured logger instance.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter = logging.Formatter(config.format)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    _close_handlers(logger)

    for handler in _build_handlers(config):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance by name (typically __name__ of the module)."""
    return logging.getLogger(name)
