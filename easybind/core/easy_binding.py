"""Module: easy_binding.py.

Date: 2026-10-19

EasyBinding - bidirectional key path binding between two object graphs.

Every key path starts with the ``root`` segment, which stands for the
observable passed next to it, e.g. ``root.house.door.color``. Each segment
after it names a public field holding an observable value on the payload of
the previous observable. The terminal observable of both paths must also be
writable.

Bindings are bidirectional: the destination/source naming only decides which
value wins when bind() is called. The destination is attached first, so its
terminal value is copied into the source.

When one side reports a new terminal value, it is written into the other side
unless that side's chain is broken (the write is skipped, nothing is queued)
or the other side already holds the very same object. That identity check is
what stops the write/notify/write ping-pong between the two sides. With a
converter, converted values are fresh objects the identity check cannot
recognize, so cross-writes triggered while a sync is already running are
dropped and a converted value equal to the target's current value is not
written. When an intermediate value on one side becomes None, the other side
is set to None.

Usage:
    binding = EasyBinding(form, "root.name", person, "root.address.street")
    binding.bind()
    ...
    binding.unbind()
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any

from easybind.core.binding_engine import UNSET, BindingEngine
from easybind.core.field_lookup import FieldLookup
from easybind.core.key_path import KeyPath
from easybind.core.path_resolver import PathResolver
from easybind.core.value_converter import ValueConverter
from easybind.errors import BindingStateError, InvalidKeyPathError
from easybind.ports.observable import ObservableValue
from easybind.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

DESTINATION = "destination"
SOURCE = "source"


@dataclass(eq=False)
class _Side:
    """One end of a binding."""

    role: str
    root: ObservableValue
    key_path: KeyPath
    engine: BindingEngine


class EasyBinding:
    """Keeps the terminal values of two key paths synchronized.

    Args:
        destination_object: observable the destination key path starts at.
        destination_key_path: dotted key path starting with ``root``.
        source_object: observable the source key path starts at.
        source_key_path: dotted key path starting with ``root``.
        converter: optional ValueConverter; ``convert`` is applied towards the
            source and ``convert_back`` towards the destination.
        field_lookup: strategy used to follow key path segments.

    Raises:
        InvalidKeyPathError: one of the key paths is malformed.

    """

    def __init__(
        self,
        destination_object: ObservableValue,
        destination_key_path: str,
        source_object: ObservableValue,
        source_key_path: str,
        converter: ValueConverter | None = None,
        field_lookup: FieldLookup | None = None,
    ) -> None:
        destination_path = self._parse(destination_key_path, DESTINATION)
        source_path = self._parse(source_key_path, SOURCE)

        self._resolver = PathResolver(field_lookup)
        self._destination = _Side(
            DESTINATION,
            destination_object,
            destination_path,
            BindingEngine(field_lookup, name=DESTINATION),
        )
        self._source = _Side(
            SOURCE,
            source_object,
            source_path,
            BindingEngine(field_lookup, name=SOURCE),
        )
        self._converter = converter

        self._bound = False
        self._released = False
        # Protection against converter ping-pong, see _on_changed
        self._syncing = False

    @staticmethod
    def _parse(key_path: str, role: str) -> KeyPath:
        try:
            return KeyPath.parse(key_path)
        except InvalidKeyPathError as e:
            raise InvalidKeyPathError(f"Invalid {role} key path: {e}") from e

    # =====================================
    # Accessors
    # =====================================

    @property
    def destination_object(self) -> ObservableValue:
        return self._destination.root

    @property
    def destination_key_path(self) -> str:
        return str(self._destination.key_path)

    @property
    def source_object(self) -> ObservableValue:
        return self._source.root

    @property
    def source_key_path(self) -> str:
        return str(self._source.key_path)

    @property
    def converter(self) -> ValueConverter | None:
        return self._converter

    @property
    def destination_engine(self) -> BindingEngine:
        return self._destination.engine

    @property
    def source_engine(self) -> BindingEngine:
        return self._source.engine

    @property
    def is_bound(self) -> bool:
        return self._bound

    @property
    def is_inert(self) -> bool:
        """True once unbind() was called; such a binding can never be bound again."""
        return self._released

    # =====================================
    # Lifecycle
    # =====================================

    def bind(self) -> None:
        """Start observing both key paths and copy the destination value to the source.

        Raises:
            BindingStateError: the binding is already bound or was unbound.
            NotWritableError: a resolvable terminal cannot be written.
            BindingConfigurationError: a key path does not fit its object graph.

        """
        if self._released:
            raise BindingStateError(f"{self!r} was unbound and cannot be bound again")
        if self._bound:
            raise BindingStateError(f"{self!r} is already bound")

        # Fail before attaching anything when a terminal is detectably read-only
        for side in (self._destination, self._source):
            self._resolver.writable_terminal(side.root, side.key_path)

        self._bound = True
        try:
            for side in (self._destination, self._source):
                side.engine.attach(
                    side.root, side.key_path, partial(self._on_changed, side)
                )
        except Exception:
            self._release()
            raise

        logger.debug("Bound %s", self, extra={"dev_only": True})

    def unbind(self) -> None:
        """Remove every listener of both sides. The binding stays inert afterwards."""
        if self._released:
            logger.debug("Unbind ignored, %s is already inert", self, extra={"dev_only": True})
            return
        self._release()
        logger.debug("Unbound %s", self, extra={"dev_only": True})

    def _release(self) -> None:
        for side in (self._destination, self._source):
            # attach() may have raised from its first sync pass after installing hops
            if side.engine.handle is not None:
                side.engine.detach(side.engine.handle)
        self._bound = False
        self._released = True

    # =====================================
    # Synchronization
    # =====================================

    def _on_changed(self, origin: _Side, value: Any) -> None:
        if value is UNSET:
            value = None

        if self._converter is None:
            self._sync(origin, value)
            return

        # Converted values are usually new objects, so the identity check
        # alone would bounce them back and forth forever.
        if self._syncing:
            return
        self._syncing = True
        try:
            self._sync(origin, value)
        finally:
            self._syncing = False

    def _sync(self, origin: _Side, value: Any) -> None:
        for target in (self._source, self._destination):
            converted = self._convert_for(origin, target, value)
            self._write(target, converted, compare_equal=converted is not value)

    def _convert_for(self, origin: _Side, target: _Side, value: Any) -> Any:
        if self._converter is None or value is None or origin is target:
            return value
        if target is self._source:
            return self._converter.convert(value)
        return self._converter.convert_back(value)

    def _write(self, target: _Side, value: Any, compare_equal: bool = False) -> None:
        terminal = self._resolver.writable_terminal(target.root, target.key_path)
        if terminal is None:
            logger.debug(
                "Skipped write to %s %s: chain is broken",
                target.role,
                target.key_path,
                extra={"dev_only": True},
            )
            return
        current = terminal.get_value()
        if current is value or (compare_equal and current == value):
            return
        terminal.set_value(value)

    def __repr__(self) -> str:
        return (
            f"<EasyBinding {self.destination_key_path} <-> {self.source_key_path}"
            f"{' bound' if self._bound else ''}>"
        )
