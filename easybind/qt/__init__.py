"""PyQt5 observable values usable as binding endpoints.

Importing this package requires PyQt5; the rest of easybind does not.
"""

from easybind.qt.qt_property import QtProperty, QtReadOnlyProperty

__all__ = ["QtProperty", "QtReadOnlyProperty"]
