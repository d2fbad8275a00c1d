"""Test fixtures for mockfs tests.

This package provides reusable pytest fixtures for testing mockfs components.
Fixtures are organized by type:

- stores: Entry stores and mock filesystems (empty, seeded, Windows-style)
- fixture_files: YAML fixture files written to a temporary directory

Import fixtures in your tests using:
    from tests.fixtures.stores import seeded_fs
    from tests.fixtures.fixture_files import sample_fixture_yaml
"""

__all__ = [
    "stores",
    "fixture_files",
]
