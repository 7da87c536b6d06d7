"""
Pytest configuration and shared fixtures for Anonymous Data tests.

Provides markers, seeded engines, and a recording console for CLI tests.
"""

import io
from collections.abc import Callable

import pytest
from rich.console import Console

from anonymous_data import AnonymousData, EngineSettings, PythonTypeCapabilities
from anonymous_data.primitives import DefaultSequenceBuilder

TEST_SEED = 0x5EED


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as property-based (Hypothesis)")
    config.addinivalue_line("markers", "cli: mark test as exercising the command-line interface")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "property" in str(item.fspath):
            item.add_marker(pytest.mark.property)

        if "cli" in item.name:
            item.add_marker(pytest.mark.cli)


# Engine fixtures
@pytest.fixture
def data() -> AnonymousData:
    """Create an engine with the default seed."""
    return AnonymousData()


@pytest.fixture
def make_data() -> Callable[..., AnonymousData]:
    """Factory fixture creating engines with a chosen seed and settings."""

    def _make(seed: int = TEST_SEED, **settings) -> AnonymousData:
        if settings:
            return AnonymousData(seed, settings=EngineSettings(**settings))
        return AnonymousData(seed)

    return _make


@pytest.fixture
def capabilities() -> PythonTypeCapabilities:
    """Create the default type capabilities."""
    return PythonTypeCapabilities()


@pytest.fixture
def sequence_builder() -> DefaultSequenceBuilder:
    """Create a sequence builder with the default bounds."""
    return DefaultSequenceBuilder()


# Console fixtures
@pytest.fixture
def console() -> Console:
    """Create a rich console writing to memory."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def console_output(console: Console) -> Callable[[], str]:
    """Read back everything printed to the in-memory console."""

    def _read() -> str:
        return console.file.getvalue()

    return _read


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove engine environment variables for the duration of a test."""
    for name in ("ANONYMOUS_DATA_SEED", "ANONYMOUS_DATA_MIN_ITEMS", "ANONYMOUS_DATA_MAX_ITEMS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
