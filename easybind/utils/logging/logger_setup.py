"""
Module: logger_setup.py

Date: 2026-10-19

Provides configure_logging() for applications that want easybind's log output
without configuring the root logger themselves. Logs INFO and higher to the
console (dev-only records filtered out) and, optionally, DEBUG and higher to a
rotating log file.
"""

import contextlib
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from easybind import config
from easybind.utils.logging.logger_factory import LoggerFactory
from easybind.utils.logging.logger_helper import DevOnlyFilter


def _level(name: str, default: int) -> int:
    return getattr(logging, str(name).upper(), default)


def configure_logging(
    console: bool = None,
    log_file: str = None,
    level: str = None,
) -> logging.Logger:
    """
    Configures logging for the ``easybind`` logger hierarchy.

    Args:
        console (bool): Add a console handler. Defaults to config.LOG_TO_CONSOLE.
        log_file (str): Path of a rotating log file. Defaults to config.LOG_FILE_PATH
            when config.LOG_TO_FILE is set, otherwise no file handler is added.
        level (str): Level applied to every cached easybind logger.

    Returns:
        logging.Logger: The package logger.
    """
    if console is None:
        console = config.LOG_TO_CONSOLE
    if log_file is None and config.LOG_TO_FILE:
        log_file = config.LOG_FILE_PATH

    package_logger = logging.getLogger("easybind")
    package_logger.setLevel(_level(level or config.LOG_LEVEL, logging.INFO))

    # Avoid stacking handlers when called more than once
    for handler in list(package_logger.handlers):
        if getattr(handler, "_easybind_handler", False):
            package_logger.removeHandler(handler)
            handler.close()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")
        console_handler.setLevel(_level(config.LOG_CONSOLE_LEVEL, logging.INFO))
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(config.LOG_CONSOLE_FORMAT))
        console_handler._easybind_handler = True
        package_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=config.LOG_FILE_MAX_BYTES,
            backupCount=config.LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(_level(config.LOG_FILE_LEVEL, logging.DEBUG))
        file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        file_handler._easybind_handler = True
        package_logger.addHandler(file_handler)

    if level is not None:
        LoggerFactory.set_global_level(_level(level, logging.INFO))

    return package_logger
