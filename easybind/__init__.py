"""easybind - bidirectional key path bindings between observable object graphs.

Date: 2026-10-19

Two key paths, each anchored at an observable value (``root.house.owner.name``),
are kept in sync: whenever the terminal value of one changes it is written into
the other, and whenever an intermediate value along a path is replaced the
rest of the path is observed again on the new objects.

Usage:
    from easybind import BindingGroup, Property

    group = BindingGroup()
    group.bind(form_root, "root.title", model_root, "root.house.name")
    ...
    group.unbind_all()
"""

from easybind.core import (
    UNSET,
    AttributeFieldLookup,
    BindingEngine,
    BindingGroup,
    ChainHandle,
    ChainResolution,
    EasyBinding,
    EngineState,
    FieldLookup,
    FunctionConverter,
    Hop,
    IdentityConverter,
    KeyPath,
    PathResolver,
    RegistryFieldLookup,
    ValueConverter,
)
from easybind.errors import (
    BindingConfigurationError,
    BindingError,
    BindingStateError,
    FieldNotFoundError,
    InvalidKeyPathError,
    NotObservableError,
    NotWritableError,
)
from easybind.ports import ObservableValue, WritableValue
from easybind.properties import Property, ReadOnlyProperty
from easybind.utils.logging import configure_logging

__version__ = "1.0.0"

__all__ = [
    "UNSET",
    "AttributeFieldLookup",
    "BindingConfigurationError",
    "BindingEngine",
    "BindingError",
    "BindingGroup",
    "BindingStateError",
    "ChainHandle",
    "ChainResolution",
    "EasyBinding",
    "EngineState",
    "FieldLookup",
    "FieldNotFoundError",
    "FunctionConverter",
    "Hop",
    "IdentityConverter",
    "InvalidKeyPathError",
    "KeyPath",
    "NotObservableError",
    "NotWritableError",
    "ObservableValue",
    "PathResolver",
    "Property",
    "ReadOnlyProperty",
    "RegistryFieldLookup",
    "ValueConverter",
    "WritableValue",
    "configure_logging",
]
