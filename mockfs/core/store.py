"""
Path-indexed entry store backing the mockfs filesystem double.

The store is the single authority over the path table. Every path is
normalized before use; keys compare case-insensitively while keeping the
casing they were first stored with. Mutations enforce:

- unique keys under case-insensitive comparison
- ancestor directories exist before a file is stored (created implicitly)
- entries flagged READ_ONLY cannot be overwritten
- directory/file classification comes only from the stored entry

Usage:
    from mockfs.core.entry import Entry
    from mockfs.core.store import EntryStore

    store = EntryStore()
    store.add_file("/data/users.csv", Entry.file("id,name\\n"))
    assert store.file_exists("/DATA/USERS.CSV")
    assert "/data" in store.all_directories
"""

import logging
import threading
from typing import Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict

from mockfs.core.settings import StoreSettings
from mockfs.core import paths
from mockfs.core.entry import Entry
from mockfs.core.exceptions import AccessDeniedError

logger = logging.getLogger(__name__)


class EntryStore:
    """
    Owner of the path -> Entry table.

    All reads and writes serialize on one re-entrant lock, so an instance may
    be shared between threads of a single test process.

    Attributes:
        settings: Separator pair and default current directory
    """

    def __init__(
        self,
        files: Optional[Mapping[str, Entry]] = None,
        current_directory: Optional[str] = None,
        settings: Optional[StoreSettings] = None,
    ):
        """
        Initialize the store.

        Args:
            files: Initial entries, each inserted through ``add_file`` so seed
                data obeys the same rules as runtime writes
            current_directory: Directory used to resolve relative paths
                (default: ``settings.current_directory``)
            settings: Path conventions (default: POSIX-style separators)

        Raises:
            AccessDeniedError: If the seed data overwrites a read-only entry
        """
        self.settings = settings or StoreSettings()
        self._entries: CaseInsensitiveDict = CaseInsensitiveDict()
        self._keys: Dict[str, str] = {}
        self._lock = threading.RLock()
        self._current_directory = self.normalize(
            current_directory or self.settings.current_directory
        )

        for path, entry in (files or {}).items():
            self.add_file(path, entry)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------
    @property
    def separator(self) -> str:
        return self.settings.separator

    @property
    def alt_separator(self) -> str:
        return self.settings.alt_separator

    @property
    def current_directory(self) -> str:
        with self._lock:
            return self._current_directory

    @current_directory.setter
    def current_directory(self, path: str) -> None:
        with self._lock:
            self._current_directory = self.get_full_path(path)
            logger.debug(f"Current directory set to {self._current_directory}")

    def normalize(self, path: Optional[str]) -> str:
        """
        Convert a path to its key form.

        Unifies separators and drops trailing separators; idempotent.
        """
        return paths.normalize(path, self.separator, self.alt_separator)

    def get_full_path(self, path: str) -> str:
        """Resolve a path against the current directory."""
        return paths.get_full_path(
            path, self._current_directory, self.separator, self.alt_separator
        )

    def _put(self, key: str, entry: Entry) -> None:
        """Store an entry under the casing its key was first stored with."""
        stored = self._keys.setdefault(key.lower(), key)
        self._entries[stored] = entry

    def _require_key(self, key: str) -> None:
        if not key:
            raise ValueError("Path must not be empty")

    def _check_writable(self, key: str, path: str) -> None:
        existing = self._entries.get(key)
        if existing is not None and existing.is_read_only:
            logger.warning(f"Write denied to read-only entry: {path}")
            raise AccessDeniedError(path)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def get_file(
        self, path: Optional[str], return_null_object: bool = False
    ) -> Optional[Entry]:
        """
        Look up the entry stored at a path.

        Args:
            path: Path to look up
            return_null_object: Return ``Entry.null()`` instead of None when
                the path is absent

        Returns:
            Stored entry, the null entry, or None
        """
        key = self.normalize(path)
        with self._lock:
            entry = self._entries.get(key) if key else None
        if entry is None and return_null_object:
            return Entry.null()
        return entry

    def file_exists(self, path: Optional[str]) -> bool:
        """Check whether any entry is stored at a path; empty paths never exist."""
        key = self.normalize(path)
        if not key:
            return False
        with self._lock:
            return key in self._entries

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_file(self, path: str, entry: Entry) -> None:
        """
        Store an entry, creating missing ancestor directories first.

        The read-only check looks at the entry currently stored at the path,
        never at ``entry``.

        Args:
            path: Destination path
            entry: Entry to store

        Raises:
            AccessDeniedError: If the stored entry at ``path`` is read-only
            ValueError: If ``path`` is empty
        """
        key = self.normalize(path)
        self._require_key(key)
        with self._lock:
            self._check_writable(key, path)

            missing = [
                parent
                for parent in paths.ancestors(key, self.separator, self.alt_separator)
                if parent not in self._entries
            ]
            for parent in reversed(missing):
                self._put(parent, Entry.directory())
                logger.debug(f"Implicitly created directory {parent}")

            self._put(key, entry)
            logger.debug(f"Stored {entry.kind.value} entry at {key}")

    def add_directory(self, path: str) -> None:
        """
        Store an empty directory entry.

        Unlike ``add_file`` this does not create missing ancestors; callers
        that need the full chain walk it themselves.

        Raises:
            AccessDeniedError: If the stored entry at ``path`` is read-only
            ValueError: If ``path`` is empty
        """
        key = self.normalize(path)
        self._require_key(key)
        with self._lock:
            self._check_writable(key, path)
            self._put(key, Entry.directory())
            logger.debug(f"Stored directory entry at {key}")

    def remove_file(self, path: str) -> None:
        """Delete the entry at a path; absent paths are ignored."""
        key = self.normalize(path)
        with self._lock:
            if key and key in self._entries:
                del self._entries[key]
                self._keys.pop(key.lower(), None)
                logger.debug(f"Removed entry at {key}")

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------
    @property
    def all_paths(self) -> set[str]:
        with self._lock:
            return set(self._entries)

    @property
    def all_files(self) -> set[str]:
        with self._lock:
            return {key for key, entry in self._entries.items() if entry.is_file}

    @property
    def all_directories(self) -> set[str]:
        with self._lock:
            return {key for key, entry in self._entries.items() if entry.is_directory}

    def enumerate(self) -> set[str]:
        return self.all_paths

    def enumerate_files(self) -> set[str]:
        return self.all_files

    def enumerate_directories(self) -> set[str]:
        return self.all_directories

    lookup = get_file
    exists = file_exists
    insert = add_file
    insert_directory = add_directory
    remove = remove_file

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.file_exists(path)
