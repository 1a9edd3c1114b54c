"""Logging utilities package.

Logging setup, factory, and helper functions.
"""

from easybind.utils.logging.logger_factory import get_cached_logger
from easybind.utils.logging.logger_setup import configure_logging

__all__ = [
    "configure_logging",
    "get_cached_logger",
]
