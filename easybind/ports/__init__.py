"""Ports consumed from the host environment."""

from easybind.ports.observable import ChangeListener, ObservableValue, WritableValue

__all__ = ["ChangeListener", "ObservableValue", "WritableValue"]
