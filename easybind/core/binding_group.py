"""Module: binding_group.py.

Date: 2026-10-19

BindingGroup - creates and tears down many bindings at once.

Typical use is one group per form or view: every binding made for the view
goes through the group, and closing the view calls unbind_all().
"""

from __future__ import annotations

from easybind.core.easy_binding import EasyBinding
from easybind.core.field_lookup import FieldLookup
from easybind.core.value_converter import ValueConverter
from easybind.ports.observable import ObservableValue
from easybind.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class BindingGroup:
    """Owns a list of bound EasyBinding instances."""

    def __init__(self, field_lookup: FieldLookup | None = None) -> None:
        self._field_lookup = field_lookup
        self._bindings: list[EasyBinding] = []

    def bind(
        self,
        destination_object: ObservableValue,
        destination_key_path: str,
        source_object: ObservableValue,
        source_key_path: str,
        converter: ValueConverter | None = None,
    ) -> EasyBinding:
        """Create a binding, bind it and add it to the group.

        Nothing is added when construction or bind() raises.
        """
        binding = EasyBinding(
            destination_object,
            destination_key_path,
            source_object,
            source_key_path,
            converter=converter,
            field_lookup=self._field_lookup,
        )
        binding.bind()
        self._bindings.append(binding)
        return binding

    def bindings(self) -> list[EasyBinding]:
        """Copy of the bindings managed by the group."""
        return list(self._bindings)

    def unbind_all(self) -> None:
        """Unbind every binding of the group and forget them."""
        count = len(self._bindings)
        for binding in self._bindings:
            binding.unbind()
        self._bindings.clear()
        logger.debug("Unbound %d bindings", count, extra={"dev_only": True})

    def __len__(self) -> int:
        return len(self._bindings)
