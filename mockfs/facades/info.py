"""
Read-only path-info views.

FileInfo and DirectoryInfo snapshot nothing: every property reads the store
at access time, using the null entry for absent paths so metadata reads never
branch on existence.
"""

from datetime import datetime
from typing import List, Optional

from mockfs.core import paths
from mockfs.core.entry import Entry, FileAttributes
from mockfs.core.exceptions import EntryNotFoundError
from mockfs.core.store import EntryStore
from mockfs.facades.directory import MockDirectory


class _InfoBase:
    def __init__(self, store: EntryStore, path: str):
        self.store = store
        self.full_name = store.get_full_path(path)

    def _entry(self) -> Entry:
        return self.store.get_file(self.full_name, return_null_object=True)

    def _directory_name(self) -> Optional[str]:
        return paths.get_directory_name(
            self.full_name, self.store.separator, self.store.alt_separator
        )

    @property
    def name(self) -> str:
        return paths.get_file_name(
            self.full_name, self.store.separator, self.store.alt_separator
        )

    @property
    def extension(self) -> str:
        return paths.get_extension(
            self.full_name, self.store.separator, self.store.alt_separator
        )

    @property
    def attributes(self) -> FileAttributes:
        return self._entry().attributes

    @property
    def creation_time(self) -> datetime:
        return self._entry().creation_time

    @property
    def last_write_time(self) -> datetime:
        return self._entry().last_write_time

    @property
    def last_access_time(self) -> datetime:
        return self._entry().last_access_time

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.store is other.store and self.full_name.lower() == other.full_name.lower()

    def __hash__(self) -> int:
        return hash(self.full_name.lower())


class FileInfo(_InfoBase):
    """Read-only view of a file path."""

    @property
    def exists(self) -> bool:
        entry = self.store.get_file(self.full_name)
        return entry is not None and entry.is_file

    @property
    def length(self) -> int:
        """
        Size of the file in bytes.

        Raises:
            EntryNotFoundError: If no file exists at the path
        """
        if not self.exists:
            raise EntryNotFoundError(self.full_name)
        return len(self.store.get_file(self.full_name).contents)

    @property
    def is_read_only(self) -> bool:
        return self._entry().is_read_only

    @property
    def directory_name(self) -> Optional[str]:
        return self._directory_name()

    @property
    def directory(self) -> Optional["DirectoryInfo"]:
        parent = self._directory_name()
        return DirectoryInfo(self.store, parent) if parent else None


class DirectoryInfo(_InfoBase):
    """Read-only view of a directory path."""

    @property
    def exists(self) -> bool:
        return MockDirectory(self.store).exists(self.full_name)

    @property
    def attributes(self) -> FileAttributes:
        if paths.is_root(self.full_name, self.store.separator, self.store.alt_separator):
            return FileAttributes.DIRECTORY
        return self._entry().attributes

    @property
    def parent(self) -> Optional["DirectoryInfo"]:
        parent = self._directory_name()
        return DirectoryInfo(self.store, parent) if parent else None

    @property
    def root(self) -> "DirectoryInfo":
        return DirectoryInfo(
            self.store,
            paths.get_path_root(
                self.full_name, self.store.separator, self.store.alt_separator
            ),
        )

    def get_files(self, pattern: str = "*", recursive: bool = False) -> List[FileInfo]:
        return [
            FileInfo(self.store, path)
            for path in MockDirectory(self.store).get_files(
                self.full_name, pattern, recursive
            )
        ]

    def get_directories(
        self, pattern: str = "*", recursive: bool = False
    ) -> List["DirectoryInfo"]:
        return [
            DirectoryInfo(self.store, path)
            for path in MockDirectory(self.store).get_directories(
                self.full_name, pattern, recursive
            )
        ]


class FileInfoFactory:
    """Creates FileInfo views bound to one store."""

    def __init__(self, store: EntryStore):
        self.store = store

    def from_file_name(self, path: str) -> FileInfo:
        return FileInfo(self.store, path)


class DirectoryInfoFactory:
    """Creates DirectoryInfo views bound to one store."""

    def __init__(self, store: EntryStore):
        self.store = store

    def from_directory_name(self, path: str) -> DirectoryInfo:
        return DirectoryInfo(self.store, path)
