"""
Core functionality for mockfs.

This package contains the entry model, the path utilities and the entry store
that every facade builds on.
"""

from .exceptions import (
    MockFsError,
    AccessDeniedError,
    EntryNotFoundError,
    DirectoryNotFoundError,
    EntryExistsError,
    DirectoryNotEmptyError,
    ConfigError,
)

from .entry import (
    Entry,
    EntryKind,
    FileAttributes,
)

from .store import (
    EntryStore,
)

__all__ = [
    "MockFsError",
    "AccessDeniedError",
    "EntryNotFoundError",
    "DirectoryNotFoundError",
    "EntryExistsError",
    "DirectoryNotEmptyError",
    "ConfigError",
    "Entry",
    "EntryKind",
    "FileAttributes",
    "EntryStore",
]
