"""File operations over an entry store."""

import logging
from datetime import datetime
from typing import List

from mockfs.core.entry import DEFAULT_ENCODING, Entry, FileAttributes
from mockfs.core.exceptions import (
    AccessDeniedError,
    EntryExistsError,
    EntryNotFoundError,
)
from mockfs.core.store import EntryStore

logger = logging.getLogger(__name__)


class MockFile:
    """
    File facade: reads and writes File entries through the store.

    Relative paths are resolved against the store's current directory.
    Absence is translated into EntryNotFoundError here; the store itself never
    raises for missing paths.
    """

    def __init__(self, store: EntryStore):
        self.store = store

    def _resolve(self, path: str) -> str:
        return self.store.get_full_path(path)

    def _get_existing_file(self, path: str) -> Entry:
        entry = self.store.get_file(path)
        if entry is None:
            raise EntryNotFoundError(path)
        if entry.is_directory:
            raise AccessDeniedError(path)
        return entry

    def exists(self, path: str) -> bool:
        """Check whether a File entry (not a directory) exists at a path."""
        if not path:
            return False
        entry = self.store.get_file(self._resolve(path))
        return entry is not None and entry.is_file

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def read_all_bytes(self, path: str) -> bytes:
        """
        Read a file's contents.

        Raises:
            EntryNotFoundError: If the file doesn't exist
            AccessDeniedError: If the path is a directory
        """
        entry = self._get_existing_file(self._resolve(path))
        return entry.contents

    def read_all_text(self, path: str, encoding: str = DEFAULT_ENCODING) -> str:
        return self.read_all_bytes(path).decode(encoding)

    def read_all_lines(self, path: str, encoding: str = DEFAULT_ENCODING) -> List[str]:
        return self.read_all_text(path, encoding).splitlines()

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------
    def _write(self, path: str, contents: bytes, append: bool = False) -> None:
        full_path = self._resolve(path)
        existing = self.store.get_file(full_path)

        if existing is None:
            self.store.add_file(full_path, Entry.file(contents))
            return

        if existing.is_directory or existing.is_read_only:
            logger.warning(f"Write denied: {full_path}")
            raise AccessDeniedError(full_path)

        existing.set_contents(existing.contents + contents if append else contents)
        logger.debug(f"Wrote {len(contents)} bytes to {full_path}")

    def write_all_bytes(self, path: str, contents: bytes) -> None:
        """
        Replace a file's contents, creating the file if needed.

        Existing files are updated in place so their attributes and creation
        time survive. New files get their ancestor directories created.

        Raises:
            AccessDeniedError: If the target is read-only or a directory
        """
        self._write(path, bytes(contents))

    def write_all_text(
        self, path: str, contents: str, encoding: str = DEFAULT_ENCODING
    ) -> None:
        self._write(path, contents.encode(encoding))

    def append_all_text(
        self, path: str, contents: str, encoding: str = DEFAULT_ENCODING
    ) -> None:
        self._write(path, contents.encode(encoding), append=True)

    def delete(self, path: str) -> None:
        """
        Delete a file. Missing files are ignored.

        Raises:
            AccessDeniedError: If the file is read-only or the path is a directory
        """
        full_path = self._resolve(path)
        entry = self.store.get_file(full_path)
        if entry is None:
            return
        if entry.is_directory or entry.is_read_only:
            logger.warning(f"Delete denied: {full_path}")
            raise AccessDeniedError(full_path)
        self.store.remove_file(full_path)

    def copy(self, source: str, destination: str, overwrite: bool = False) -> None:
        """
        Copy a file's contents and attributes to a new path.

        Raises:
            EntryNotFoundError: If the source doesn't exist
            EntryExistsError: If the destination exists and overwrite is False
            AccessDeniedError: If the destination is read-only
        """
        entry = self._get_existing_file(self._resolve(source))
        destination = self._resolve(destination)
        existing = self.store.get_file(destination)
        if existing is not None and not overwrite:
            raise EntryExistsError(destination)
        if existing is not None and existing.is_directory:
            raise AccessDeniedError(destination)

        self.store.add_file(
            destination, Entry.file(entry.contents, attributes=entry.attributes)
        )

    def move(self, source: str, destination: str) -> None:
        """
        Move a file, keeping its entry (attributes and timestamps) intact.

        Raises:
            EntryNotFoundError: If the source doesn't exist
            EntryExistsError: If anything exists at the destination
        """
        source = self._resolve(source)
        entry = self._get_existing_file(source)
        destination = self._resolve(destination)
        if self.store.file_exists(destination):
            raise EntryExistsError(destination)

        self.store.add_file(destination, entry)
        self.store.remove_file(source)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    def get_attributes(self, path: str) -> FileAttributes:
        entry = self.store.get_file(self._resolve(path))
        if entry is None:
            raise EntryNotFoundError(path)
        return entry.attributes

    def set_attributes(self, path: str, attributes: FileAttributes) -> None:
        """Set attribute flags; this is how a read-only file is made writable again."""
        entry = self.store.get_file(self._resolve(path))
        if entry is None:
            raise EntryNotFoundError(path)
        if entry.is_directory:
            attributes |= FileAttributes.DIRECTORY
        entry.attributes = attributes

    def get_creation_time(self, path: str) -> datetime:
        return self.store.get_file(self._resolve(path), return_null_object=True).creation_time

    def get_last_write_time(self, path: str) -> datetime:
        return self.store.get_file(
            self._resolve(path), return_null_object=True
        ).last_write_time

    def set_last_write_time(self, path: str, value: datetime) -> None:
        self._get_existing_file(self._resolve(path)).last_write_time = value
