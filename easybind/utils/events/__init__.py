"""Module: __init__.py.

Date: 2026-10-19

Event System.

Pure Python event/signal implementation backing the non-Qt properties.
"""

from easybind.utils.events.observable import Observable, Signal, SignalInstance

__all__ = ["Observable", "Signal", "SignalInstance"]
