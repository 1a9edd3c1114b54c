"""Module: path_resolver.py.

Date: 2026-10-19

PathResolver - walks a key path one segment at a time.

Starting from an observable, the resolver reads its payload, looks the next
segment up on that payload and continues with the observable found there,
until the path is consumed or a payload is None. A None payload is a broken
chain and is reported as such. A segment that cannot be looked up is a
configuration error and raised immediately: no later change of the graph could
make it resolvable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from easybind.core.field_lookup import DEFAULT_FIELD_LOOKUP, FieldLookup
from easybind.core.key_path import KeyPath
from easybind.errors import (
    FieldNotFoundError,
    NotObservableError,
    NotWritableError,
    describe_failure,
)
from easybind.ports.observable import ObservableValue, WritableValue


@dataclass(frozen=True)
class ChainResolution:
    """Observables found while resolving a key path.

    ``observables[k]`` is the observable at key path index ``start + k``. The
    resolution is complete when the last observable sits at the last index of
    the key path.
    """

    key_path: KeyPath
    start: int
    observables: tuple[ObservableValue, ...]

    @property
    def end(self) -> int:
        """Key path index just after the last resolved observable."""
        return self.start + len(self.observables)

    @property
    def complete(self) -> bool:
        return self.end == len(self.key_path)

    @property
    def broken_at(self) -> int | None:
        """Index of the observable whose None payload stopped resolution."""
        if self.complete:
            return None
        return self.end - 1

    @property
    def terminal(self) -> ObservableValue | None:
        return self.observables[-1] if self.complete else None

    @property
    def writable(self) -> bool:
        return self.complete and isinstance(self.terminal, WritableValue)

    def terminal_value(self, default: Any = None) -> Any:
        if not self.complete:
            return default
        return self.terminal.get_value()


class PathResolver:
    """Stateless key path walker.

    Args:
        field_lookup: strategy used to follow a segment on a payload object.

    """

    def __init__(self, field_lookup: FieldLookup | None = None) -> None:
        self.field_lookup = field_lookup or DEFAULT_FIELD_LOOKUP

    def resolve(
        self,
        root: ObservableValue,
        key_path: KeyPath,
        start: int = 0,
        origin: Any = None,
    ) -> ChainResolution:
        """Resolve ``key_path`` from the observable at index ``start``.

        Args:
            root: observable standing at index ``start`` of the key path.
            key_path: the full key path.
            start: index of ``root`` in the key path, 0 for the path's anchor.
            origin: object named in error messages, defaults to ``root``.

        Raises:
            FieldNotFoundError: a segment names a missing field.
            NotObservableError: a segment names a field that is not observable.

        """
        if origin is None:
            origin = root

        observables = [root]
        current = root
        for index in range(start + 1, len(key_path)):
            payload = current.get_value()
            if payload is None:
                break
            current = self._lookup(payload, key_path, index, origin)
            observables.append(current)

        return ChainResolution(key_path=key_path, start=start, observables=tuple(observables))

    def terminal_observable(self, root: ObservableValue, key_path: KeyPath) -> ObservableValue | None:
        """Terminal observable of ``key_path``, None when the chain is broken."""
        return self.resolve(root, key_path).terminal

    def writable_terminal(self, root: ObservableValue, key_path: KeyPath) -> WritableValue | None:
        """Terminal observable of ``key_path`` as a writable value.

        Returns None when the chain is broken.

        Raises:
            NotWritableError: the chain resolved but its terminal cannot be written.

        """
        resolution = self.resolve(root, key_path)
        if not resolution.complete:
            return None
        if not resolution.writable:
            raise NotWritableError(
                describe_failure(key_path, root, str(key_path), "is not a writable value")
            )
        return resolution.terminal

    def _lookup(self, payload: Any, key_path: KeyPath, index: int, origin: Any) -> ObservableValue:
        current_path = key_path.prefix(index)
        try:
            return self.field_lookup.lookup(payload, key_path[index])
        except FieldNotFoundError as e:
            raise FieldNotFoundError(
                describe_failure(key_path, origin, current_path, "could not be found")
            ) from e
        except NotObservableError as e:
            raise NotObservableError(
                describe_failure(key_path, origin, current_path, "is not an observable value")
            ) from e
