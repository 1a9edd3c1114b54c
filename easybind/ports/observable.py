"""Observable value ports.

Date: 2026-10-19

Capabilities the binding core consumes from the host environment. Any object
offering get_value/add_listener/remove_listener is an observable value; one
that also offers set_value is writable. The core never owns these objects, it
only attaches and removes listeners on them.

Listeners are called as ``listener(observable, old_value, new_value)``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

ChangeListener = Callable[[Any, Any, Any], None]


@runtime_checkable
class ObservableValue(Protocol):
    """Value container that reports its payload and notifies on change."""

    def get_value(self) -> Any:
        """Return the current payload."""
        ...

    def add_listener(self, listener: ChangeListener) -> Any:
        """Register a change listener and return the handle that removes it."""
        ...

    def remove_listener(self, handle: Any) -> None:
        """Remove a listener registered with add_listener."""
        ...


@runtime_checkable
class WritableValue(ObservableValue, Protocol):
    """Observable value that also accepts a new payload."""

    def set_value(self, value: Any) -> None:
        """Replace the payload, notifying listeners if it changed."""
        ...
