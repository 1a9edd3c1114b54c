"""Module: key_path.py.

Date: 2026-10-19

KeyPath - parsed, validated dotted key path.

A key path such as ``root.house.owner.name`` is split into segments. The first
segment is the root marker and stands for the observable the path is anchored
at; every following segment is a field name looked up on the payload of the
previous observable.
"""

from __future__ import annotations

from collections.abc import Iterator

from easybind import config
from easybind.errors import InvalidKeyPathError


class KeyPath:
    """Immutable sequence of key path segments starting with the root marker."""

    __slots__ = ("_segments",)

    def __init__(self, segments: tuple[str, ...] | list[str]):
        segments = tuple(segments)
        if not segments:
            raise InvalidKeyPathError("A key path needs at least the root segment")
        if segments[0] != config.ROOT_KEY:
            raise InvalidKeyPathError(
                f"The key path {config.KEY_PATH_SEPARATOR.join(segments)!r} "
                f"should have the {config.ROOT_KEY!r} prefix"
            )
        for segment in segments:
            if not segment:
                raise InvalidKeyPathError(
                    f"The key path {config.KEY_PATH_SEPARATOR.join(segments)!r} "
                    "contains an empty segment"
                )
        self._segments = segments

    @classmethod
    def parse(cls, key_path: str | KeyPath) -> KeyPath:
        """Split a dotted string into a KeyPath. KeyPath instances pass through."""
        if isinstance(key_path, KeyPath):
            return key_path
        if not isinstance(key_path, str) or not key_path:
            raise InvalidKeyPathError(f"Invalid key path: {key_path!r}")
        return cls(key_path.split(config.KEY_PATH_SEPARATOR))

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    def prefix(self, index: int) -> str:
        """Dotted rendering of segments 0..index, used in error messages."""
        return config.KEY_PATH_SEPARATOR.join(self._segments[: index + 1])

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, index: int) -> str:
        return self._segments[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KeyPath):
            return self._segments == other._segments
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._segments)

    def __str__(self) -> str:
        return config.KEY_PATH_SEPARATOR.join(self._segments)

    def __repr__(self) -> str:
        return f"KeyPath({str(self)!r})"
