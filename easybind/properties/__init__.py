"""Pure Python observable values usable as binding endpoints."""

from easybind.properties.property import Property, ReadOnlyProperty

__all__ = ["Property", "ReadOnlyProperty"]
