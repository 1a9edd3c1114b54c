"""
Module: conftest.py

Date: 2026-10-19

Global pytest configuration and fixtures for the easybind test suite.
Includes CI-friendly setup for PyQt5 testing and common fixtures.
"""

import os
import sys

# Add project root to sys.path so 'easybind' and 'tests.mocks' can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tests.mocks import Recorder, make_person


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring a Qt application")


def pytest_collection_modifyitems(session, config, items):
    """Skip Qt tests when PyQt5 cannot be imported."""
    _ = session
    _ = config

    try:
        import PyQt5  # noqa: F401
    except ImportError:
        skip_gui = pytest.mark.skip(reason="PyQt5 is not installed")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)


@pytest.fixture
def recorder():
    """Fixture providing a terminal change callback that records values."""
    return Recorder()


@pytest.fixture
def person_root():
    """Root property -> Person -> House('Villa') without an owner."""
    return make_person("Villa")


@pytest.fixture
def owned_root():
    """Root property -> Person -> House('Villa') -> Owner('Evy')."""
    return make_person("Villa", owner_name="Evy")
