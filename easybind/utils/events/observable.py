"""Module: observable.py.

Date: 2026-10-19

Observable - Pure Python Observer pattern implementation.

Provides Qt signal-like functionality without Qt dependency:
- Signal descriptor for defining events
- Observable base class for state management
- Connect/disconnect/emit interface
- Emission from a snapshot of the connected callbacks

Used by the pure-Python properties; the Qt properties use pyqtSignal instead.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from easybind.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class MyClass(Observable):
            value_changed = Signal(object, object)

        obj = MyClass()
        obj.value_changed.connect(callback)
        obj.value_changed.emit(old, new)
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with expected argument types.

        Args:
            *arg_types: Type hints for signal arguments (for documentation only)

        """
        self.arg_types = arg_types
        self.name = ""  # Set by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when signal is assigned to class attribute."""
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        """Get signal instance for object."""
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance

        return instance


class SignalInstance:
    """Instance of a signal for a specific object."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        """Initialize signal instance.

        Args:
            name: Signal name (for debugging)
            arg_types: Expected argument types

        """
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect callback to signal. Connecting the same callback twice is a no-op."""
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)
                logger.debug(
                    "Signal connected: %s -> %s",
                    self.name,
                    _callback_name(callback),
                    extra={"dev_only": True},
                )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> bool:
        """Disconnect callback from signal.

        Args:
            callback: Callback to remove. If None, removes all callbacks.

        Returns:
            True if at least one callback was removed.

        """
        with self._lock:
            if callback is None:
                count = len(self._callbacks)
                self._callbacks.clear()
                logger.debug(
                    "All callbacks disconnected from %s (count: %d)",
                    self.name,
                    count,
                    extra={"dev_only": True},
                )
                return count > 0

            if callback in self._callbacks:
                self._callbacks.remove(callback)
                logger.debug(
                    "Signal disconnected: %s -> %s",
                    self.name,
                    _callback_name(callback),
                    extra={"dev_only": True},
                )
                return True

        return False

    def receivers(self) -> int:
        """Number of connected callbacks."""
        with self._lock:
            return len(self._callbacks)

    def emit(self, *args: Any) -> None:
        """Emit signal with arguments.

        Callbacks are called from a snapshot taken before the first call, so a
        callback disconnected by an earlier one in the same emission is still
        invoked. Errors raised by a callback are logged and re-raised.

        Args:
            *args: Arguments to pass to connected callbacks

        """
        with self._lock:
            callbacks = self._callbacks.copy()

        # Call outside lock to avoid deadlocks
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s", self.name, _callback_name(callback)
                )
                raise


class Observable:
    """Base class for objects with observable signals.

    Use Signal descriptor to define events:

        class Counter(Observable):
            value_changed = Signal(int)

            def increment(self):
                self._value += 1
                self.value_changed.emit(self._value)
    """

    def __init__(self) -> None:
        """Initialize observable."""
        super().__init__()


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__name__", repr(callback))
