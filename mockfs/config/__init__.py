"""
Configuration for mockfs: store settings and YAML fixture files.
"""

from mockfs.core.settings import StoreSettings
from .fixtures import (
    Fixture,
    load_fixture,
    parse_fixture,
    fixture_data,
    dump_fixture,
)

__all__ = [
    "StoreSettings",
    "Fixture",
    "load_fixture",
    "parse_fixture",
    "fixture_data",
    "dump_fixture",
]
