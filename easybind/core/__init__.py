"""Module: __init__.py.

Date: 2026-10-19

Key path binding core: path parsing, resolution, the per-path engine and the
bidirectional binding built on top of it.
"""

from easybind.core.binding_engine import UNSET, BindingEngine, ChainHandle, EngineState, Hop
from easybind.core.binding_group import BindingGroup
from easybind.core.easy_binding import EasyBinding
from easybind.core.field_lookup import AttributeFieldLookup, FieldLookup, RegistryFieldLookup
from easybind.core.key_path import KeyPath
from easybind.core.path_resolver import ChainResolution, PathResolver
from easybind.core.value_converter import FunctionConverter, IdentityConverter, ValueConverter

__all__ = [
    "UNSET",
    "AttributeFieldLookup",
    "BindingEngine",
    "BindingGroup",
    "ChainHandle",
    "ChainResolution",
    "EasyBinding",
    "EngineState",
    "FieldLookup",
    "FunctionConverter",
    "Hop",
    "IdentityConverter",
    "KeyPath",
    "PathResolver",
    "RegistryFieldLookup",
    "ValueConverter",
]
