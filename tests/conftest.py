"""
Pytest configuration and shared fixtures for mockfs tests.
"""

import pytest

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.stores import (
    empty_store,
    mock_fs,
    seeded_fs,
    windows_fs,
)
from tests.fixtures.fixture_files import (
    sample_fixture_yaml,
    windows_fixture_yaml,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def debug_logging(caplog):
    """Capture mockfs debug logs for the duration of a test."""
    caplog.set_level("DEBUG", logger="mockfs")
    return caplog
