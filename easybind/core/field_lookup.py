"""Module: field_lookup.py.

Date: 2026-10-19

Field lookup strategies used to follow one key path segment.

Given the payload object of an observable and a segment name, a lookup returns
the observable value stored under that name. Two strategies are provided:

- AttributeFieldLookup: public attribute access on the payload object.
- RegistryFieldLookup: explicit accessors registered per type and name,
  for object graphs that should not be walked through attributes.

Usage:
    lookup = RegistryFieldLookup()
    lookup.register(House, "owner", lambda house: house.owner_property)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from easybind.errors import FieldNotFoundError, NotObservableError
from easybind.ports.observable import ObservableValue
from easybind.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

Accessor = Callable[[Any], Any]


@runtime_checkable
class FieldLookup(Protocol):
    """Resolve one key path segment on a payload object."""

    def lookup(self, obj: Any, name: str) -> ObservableValue:
        """Return the observable named ``name`` on ``obj``.

        Raises:
            FieldNotFoundError: ``obj`` has no such field.
            NotObservableError: the field exists but is not an observable value.

        """
        ...


def ensure_observable(value: Any, obj: Any, name: str) -> ObservableValue:
    """Check that a looked-up field value is an observable value."""
    if not isinstance(value, ObservableValue):
        raise NotObservableError(
            f"Field {name!r} of {type(obj).__name__} is a {type(value).__name__}, "
            "not an observable value"
        )
    return value


class AttributeFieldLookup:
    """Looks segments up as public attributes of the payload object."""

    def lookup(self, obj: Any, name: str) -> ObservableValue:
        if name.startswith("_"):
            raise FieldNotFoundError(f"{type(obj).__name__} has no public field {name!r}")
        try:
            value = getattr(obj, name)
        except AttributeError as e:
            raise FieldNotFoundError(f"{type(obj).__name__} has no field {name!r}") from e
        return ensure_observable(value, obj, name)


class RegistryFieldLookup:
    """Looks segments up through accessors registered per (type, name).

    Registrations are inherited: a lookup on an instance walks the type's MRO
    and uses the first accessor registered for the name. When nothing is
    registered, the optional fallback lookup is used, otherwise the field is
    reported as missing.
    """

    def __init__(self, fallback: FieldLookup | None = None) -> None:
        self._accessors: dict[type, dict[str, Accessor]] = {}
        self._fallback = fallback

    def register(self, owner: type, name: str, accessor: Accessor) -> None:
        """Register ``accessor(obj) -> observable`` for segment ``name`` on ``owner``."""
        self._accessors.setdefault(owner, {})[name] = accessor
        logger.debug(
            "Registered field accessor: %s.%s",
            owner.__name__,
            name,
            extra={"dev_only": True},
        )

    def unregister(self, owner: type, name: str) -> None:
        names = self._accessors.get(owner)
        if names is not None:
            names.pop(name, None)
            if not names:
                del self._accessors[owner]

    def accessor_for(self, owner: type, name: str) -> Accessor | None:
        for klass in owner.__mro__:
            accessor = self._accessors.get(klass, {}).get(name)
            if accessor is not None:
                return accessor
        return None

    def lookup(self, obj: Any, name: str) -> ObservableValue:
        accessor = self.accessor_for(type(obj), name)
        if accessor is None:
            if self._fallback is not None:
                return self._fallback.lookup(obj, name)
            raise FieldNotFoundError(
                f"No accessor registered for field {name!r} of {type(obj).__name__}"
            )
        try:
            value = accessor(obj)
        except AttributeError as e:
            raise FieldNotFoundError(
                f"Accessor for field {name!r} of {type(obj).__name__} failed: {e}"
            ) from e
        return ensure_observable(value, obj, name)


DEFAULT_FIELD_LOOKUP = AttributeFieldLookup()
