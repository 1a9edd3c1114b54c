"""Module: binding_engine.py.

Date: 2026-10-19

BindingEngine - keeps one key path observed while its object graph changes.

The engine owns an array with one slot per key path index. Each filled slot
is a Hop: the observable resolved at that index and the listener handle
registered on it. Slots always form a prefix of the key path.

When the observable of hop i reports a new payload, every hop after i is
torn down, the rest of the path is resolved again from hop i, fresh hops are
installed for whatever resolves, and the callback receives either the new
terminal value or UNSET when a None payload breaks the chain.

Threading: single-threaded. All notifications must be delivered on the thread
that attached the engine (the Qt GUI thread when used with QtProperty).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from easybind.core.field_lookup import FieldLookup
from easybind.core.key_path import KeyPath
from easybind.core.path_resolver import ChainResolution, PathResolver
from easybind.errors import BindingStateError
from easybind.ports.observable import ObservableValue
from easybind.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class _Unset:
    """Terminal state of a broken chain."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

TerminalCallback = Callable[[Any], None]


class EngineState(Enum):
    """Lifecycle of a BindingEngine."""

    INERT = "inert"
    ACTIVE = "active"


@dataclass(eq=False)
class Hop:
    """One observed step of the resolved chain."""

    index: int
    observable: ObservableValue
    handle: Any = None


class ChainHandle:
    """Returned by BindingEngine.attach(); pass it back to detach()."""

    def __init__(self, key_path: KeyPath) -> None:
        self.key_path = key_path
        self.active = True

    def __repr__(self) -> str:
        state = "active" if self.active else "inert"
        return f"<ChainHandle {self.key_path} ({state})>"


class BindingEngine:
    """Observes every observable along one key path.

    Args:
        field_lookup: strategy used to follow key path segments.
        name: label used in log messages (e.g. "destination").

    """

    def __init__(self, field_lookup: FieldLookup | None = None, name: str = "") -> None:
        self.name = name
        self._resolver = PathResolver(field_lookup)
        self._hops: list[Hop | None] = []
        self._root: ObservableValue | None = None
        self._key_path: KeyPath | None = None
        self._callback: TerminalCallback | None = None
        self._handle: ChainHandle | None = None

    # =====================================
    # State inspection
    # =====================================

    @property
    def state(self) -> EngineState:
        return EngineState.ACTIVE if self._handle is not None else EngineState.INERT

    @property
    def is_active(self) -> bool:
        return self._handle is not None

    @property
    def key_path(self) -> KeyPath | None:
        return self._key_path

    @property
    def handle(self) -> ChainHandle | None:
        """Handle returned by the current attach(), None while inert."""
        return self._handle

    @property
    def hops(self) -> tuple[Hop, ...]:
        """Snapshot of the installed hops, in key path order."""
        return tuple(hop for hop in self._hops if hop is not None)

    @property
    def hop_count(self) -> int:
        return sum(1 for hop in self._hops if hop is not None)

    @property
    def is_fully_resolved(self) -> bool:
        return bool(self._hops) and self._hops[-1] is not None

    def terminal_value(self) -> Any:
        """Current terminal value, or UNSET when the chain is broken or inert."""
        if not self.is_fully_resolved:
            return UNSET
        return self._hops[-1].observable.get_value()

    # =====================================
    # Attach / detach
    # =====================================

    def attach(
        self,
        root: ObservableValue,
        key_path: KeyPath | str,
        on_terminal_change: TerminalCallback,
    ) -> ChainHandle:
        """Start observing ``key_path`` from ``root``.

        Installs one hop per resolvable observable, then calls
        ``on_terminal_change`` once with the terminal value or UNSET.

        Raises:
            BindingStateError: the engine is already attached.
            BindingConfigurationError: the key path does not fit the graph.
                No hop is installed in that case.

        """
        if self._handle is not None:
            raise BindingStateError(
                f"{self._label()} is already attached to {self._key_path}; detach it first"
            )

        key_path = KeyPath.parse(key_path)
        resolution = self._resolver.resolve(root, key_path)

        self._root = root
        self._key_path = key_path
        self._callback = on_terminal_change
        self._hops = [None] * len(key_path)
        handle = ChainHandle(key_path)
        self._handle = handle

        self._install(resolution, first_index=0)
        logger.debug(
            "%s attached to %s (%d/%d hops)",
            self._label(),
            key_path,
            self.hop_count,
            len(key_path),
            extra={"dev_only": True},
        )

        self._notify()
        return handle

    def detach(self, handle: ChainHandle) -> None:
        """Remove every listener installed by attach() and return to INERT.

        Raises:
            BindingStateError: ``handle`` is not this engine's active handle.

        """
        if handle is None or handle is not self._handle or not handle.active:
            raise BindingStateError(f"{self._label()}: {handle!r} is not attached")

        self._teardown_after(-1)
        handle.active = False
        logger.debug(
            "%s detached from %s", self._label(), self._key_path, extra={"dev_only": True}
        )

        self._handle = None
        self._callback = None
        self._root = None
        self._hops = []

    # =====================================
    # Hop lifecycle
    # =====================================

    def _install(self, resolution: ChainResolution, first_index: int) -> None:
        for offset, observable in enumerate(resolution.observables):
            index = resolution.start + offset
            if index < first_index:
                continue
            hop = Hop(index=index, observable=observable)
            hop.handle = observable.add_listener(self._listener_for(hop))
            self._hops[index] = hop
            logger.debug(
                "%s installed hop %s", self._label(), self._key_path.prefix(index),
                extra={"dev_only": True},
            )

    def _teardown_after(self, index: int) -> None:
        for j in range(len(self._hops) - 1, index, -1):
            hop = self._hops[j]
            if hop is None:
                continue
            # Clear the slot first so a delivery already in flight is seen as stale
            self._hops[j] = None
            hop.observable.remove_listener(hop.handle)
            logger.debug(
                "%s removed hop %s", self._label(), self._key_path.prefix(j),
                extra={"dev_only": True},
            )

    def _listener_for(self, hop: Hop) -> Callable[[Any, Any, Any], None]:
        def on_change(_observable: Any, _old: Any, _new: Any) -> None:
            self._on_hop_changed(hop)

        return on_change

    def _on_hop_changed(self, hop: Hop) -> None:
        if self._handle is None or hop.index >= len(self._hops) or self._hops[hop.index] is not hop:
            logger.debug(
                "%s ignored change from a removed hop at index %d",
                self._label(),
                hop.index,
                extra={"dev_only": True},
            )
            return

        self._teardown_after(hop.index)
        resolution = self._resolver.resolve(
            hop.observable, self._key_path, start=hop.index, origin=self._root
        )
        self._install(resolution, first_index=hop.index + 1)
        self._notify()

    def _notify(self) -> None:
        callback = self._callback
        if callback is None:
            return
        callback(self.terminal_value())

    def _label(self) -> str:
        return f"BindingEngine[{self.name}]" if self.name else "BindingEngine"

    def __repr__(self) -> str:
        return (
            f"<{self._label()} {self.state.value} {self._key_path} "
            f"hops={self.hop_count}>"
        )
