"""Module: property.py.

Date: 2026-10-19

Pure Python observable values.

ReadOnlyProperty reports its payload and notifies listeners; Property adds
set_value() and is therefore writable. Listeners are notified when the payload
is replaced by a different object, with ``(property, old_value, new_value)``.

Usage:
    class House:
        def __init__(self, name):
            self.name = Property(name)

    house = Property(House("Villa"))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from easybind.utils.events import Observable, Signal
from easybind.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class _Subscription:
    """Handle returned by add_listener(); forwards the signal to one listener."""

    __slots__ = ("listener", "source")

    def __init__(self, source: ReadOnlyProperty, listener: Callable[[Any, Any, Any], None]):
        self.source = source
        self.listener = listener

    def __call__(self, old_value: Any, new_value: Any) -> None:
        self.listener(self.source, old_value, new_value)


class ReadOnlyProperty(Observable):
    """Observable value without a public setter."""

    value_changed = Signal(object, object)  # old value, new value

    def __init__(self, value: Any = None, name: str = "") -> None:
        super().__init__()
        self._value = value
        self.name = name

    def get_value(self) -> Any:
        return self._value

    def add_listener(self, listener: Callable[[Any, Any, Any], None]) -> _Subscription:
        subscription = _Subscription(self, listener)
        self.value_changed.connect(subscription)
        return subscription

    def remove_listener(self, handle: _Subscription) -> None:
        if not self.value_changed.disconnect(handle):
            logger.warning("remove_listener: %r was not registered on %r", handle, self)

    def listener_count(self) -> int:
        return self.value_changed.receivers()

    def _set(self, value: Any) -> None:
        old_value = self._value
        if old_value is value:
            return
        self._value = value
        self.value_changed.emit(old_value, value)

    def __repr__(self) -> str:
        label = f" {self.name}" if self.name else ""
        return f"<{type(self).__name__}{label} value={self._value!r}>"


class Property(ReadOnlyProperty):
    """Writable observable value."""

    def set_value(self, value: Any) -> None:
        self._set(value)

