"""Module: qt_property.py.

Date: 2026-10-19

Qt observable values.

QtReadOnlyProperty / QtProperty are QObjects carrying a payload and a
``value_changed(old, new)`` pyqtSignal, so they can be connected to widgets
with the usual signal/slot machinery and used as binding endpoints at the same
time. They must live on, and be modified from, the GUI thread.

Usage:
    title = QtProperty("Untitled")
    title.value_changed.connect(lambda _old, new: label.setText(new))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from PyQt5.QtCore import QObject, pyqtSignal

from easybind.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class QtReadOnlyProperty(QObject):
    """QObject based observable value without a public setter."""

    value_changed = pyqtSignal(object, object)  # old value, new value

    def __init__(self, value: Any = None, name: str = "", parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._value = value
        if name:
            self.setObjectName(name)

    def get_value(self) -> Any:
        return self._value

    def add_listener(self, listener: Callable[[Any, Any, Any], None]) -> Callable[[Any, Any], None]:
        def slot(old_value: Any, new_value: Any) -> None:
            listener(self, old_value, new_value)

        self.value_changed.connect(slot)
        return slot

    def remove_listener(self, handle: Callable[[Any, Any], None]) -> None:
        try:
            self.value_changed.disconnect(handle)
        except TypeError:
            # PyQt raises TypeError for a slot that is not connected
            logger.warning(
                "remove_listener: slot was not connected to %r", self.objectName()
            )

    def listener_count(self) -> int:
        return self.receivers(self.value_changed)

    def _set(self, value: Any) -> None:
        old_value = self._value
        if old_value is value:
            return
        self._value = value
        self.value_changed.emit(old_value, value)


class QtProperty(QtReadOnlyProperty):
    """Writable QObject based observable value."""

    def set_value(self, value: Any) -> None:
        self._set(value)
