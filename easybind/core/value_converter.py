"""Module: value_converter.py.

Date: 2026-10-19

Value converters applied to values crossing a binding.

A converter works in both directions: ``convert`` maps a destination value to
the source representation, ``convert_back`` maps a source value to the
destination representation. None and UNSET are never passed to a converter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValueConverter(Protocol):
    """Bidirectional value transform."""

    def convert(self, value: Any) -> Any:
        """Destination value -> source value."""
        ...

    def convert_back(self, value: Any) -> Any:
        """Source value -> destination value."""
        ...


class IdentityConverter:
    """Passes values through unchanged."""

    def convert(self, value: Any) -> Any:
        return value

    def convert_back(self, value: Any) -> Any:
        return value


class FunctionConverter:
    """Converter built from two plain functions.

    Usage:
        FunctionConverter(str, int)  # int destination <-> str source
    """

    def __init__(self, forward: Callable[[Any], Any], backward: Callable[[Any], Any]) -> None:
        self._forward = forward
        self._backward = backward

    def convert(self, value: Any) -> Any:
        return self._forward(value)

    def convert_back(self, value: Any) -> Any:
        return self._backward(value)

    def __repr__(self) -> str:
        forward = getattr(self._forward, "__name__", repr(self._forward))
        backward = getattr(self._backward, "__name__", repr(self._backward))
        return f"FunctionConverter({forward}, {backward})"
