"""Module: errors.py.

Date: 2026-10-19

Exception hierarchy for key path bindings.

Every error raised by easybind derives from BindingConfigurationError: they all
mean the declared key path does not match the object graph, or the API was
misused. None of them is recoverable by retrying. A key path that merely hits
a None value along the way is not an error (see binding_engine.UNSET).
"""

from __future__ import annotations


class BindingError(Exception):
    """Base class for all binding errors."""


class BindingConfigurationError(BindingError):
    """The key path or the binding usage is wrong and must be fixed by the caller."""


class InvalidKeyPathError(BindingConfigurationError, ValueError):
    """Malformed key path: empty, empty segment, or missing the root prefix."""


class FieldNotFoundError(BindingConfigurationError, AttributeError):
    """A key path segment names a field the payload object does not have."""


class NotObservableError(BindingConfigurationError, TypeError):
    """A key path segment names a field whose value is not an observable value."""


class NotWritableError(BindingConfigurationError, TypeError):
    """The terminal observable of a key path cannot accept a new value."""


class BindingStateError(BindingConfigurationError, RuntimeError):
    """Attach/detach/bind called in a state that does not allow it."""


def describe_failure(key_path: object, root: object, current_path: str, reason: str) -> str:
    """Build the message shared by the resolution errors."""
    return f"Could not bind {key_path} of object {root!r} because the field {current_path} {reason}"
