"""Directory operations over an entry store."""

import fnmatch
import logging
from typing import Iterable, List, Optional

from mockfs.core import paths
from mockfs.core.exceptions import (
    AccessDeniedError,
    DirectoryNotEmptyError,
    DirectoryNotFoundError,
    EntryExistsError,
)
from mockfs.core.store import EntryStore

logger = logging.getLogger(__name__)


class MockDirectory:
    """
    Directory facade: creates, lists and deletes Directory entries.

    ``add_directory`` on the store does not create ancestors, so
    ``create_directory`` walks the path from the root and inserts each missing
    segment itself. Listing is a case-insensitive prefix filter over the
    store's enumerations.
    """

    def __init__(self, store: EntryStore):
        self.store = store

    def _resolve(self, path: str) -> str:
        return self.store.get_full_path(path)

    def _is_root(self, path: str) -> bool:
        return paths.is_root(path, self.store.separator, self.store.alt_separator)

    def exists(self, path: str) -> bool:
        """Check whether a directory exists; roots always do."""
        if not path:
            return False
        full_path = self._resolve(path)
        if self._is_root(full_path):
            return True
        entry = self.store.get_file(full_path)
        return entry is not None and entry.is_directory

    def create_directory(self, path: str) -> str:
        """
        Create a directory and every missing parent.

        Existing directories along the way are left untouched.

        Args:
            path: Directory to create

        Returns:
            Resolved path of the directory

        Raises:
            EntryExistsError: If a file occupies one of the path segments
        """
        full_path = self._resolve(path)
        chain = list(
            paths.ancestors(full_path, self.store.separator, self.store.alt_separator)
        )
        chain.reverse()
        if not self._is_root(full_path):
            chain.append(full_path)

        for segment in chain:
            entry = self.store.get_file(segment)
            if entry is None:
                self.store.add_directory(segment)
            elif entry.is_file:
                raise EntryExistsError(segment)

        return full_path

    def delete(self, path: str, recursive: bool = False) -> None:
        """
        Delete a directory.

        Every check runs before anything is removed, so a failed delete leaves
        the table untouched.

        Args:
            path: Directory to delete
            recursive: Also delete everything below the directory

        Raises:
            DirectoryNotFoundError: If no directory exists at ``path``
            DirectoryNotEmptyError: If it has children and recursive is False
            AccessDeniedError: If any entry to be removed is read-only
        """
        full_path = self._resolve(path)
        entry = self.store.get_file(full_path)
        if entry is None or not entry.is_directory:
            raise DirectoryNotFoundError(full_path)

        children = self.get_file_system_entries(full_path, recursive=True)
        if children and not recursive:
            raise DirectoryNotEmptyError(full_path)

        targets = children + [full_path]
        for target in targets:
            if self.store.get_file(target).is_read_only:
                logger.warning(f"Delete denied: {target}")
                raise AccessDeniedError(target)

        for target in sorted(targets, key=len, reverse=True):
            self.store.remove_file(target)
        logger.debug(f"Deleted directory {full_path} ({len(children)} children)")

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------
    def _list(
        self, path: str, candidates: Iterable[str], pattern: str, recursive: bool
    ) -> List[str]:
        full_path = self._resolve(path)
        if not self.exists(full_path):
            raise DirectoryNotFoundError(full_path)

        sep = self.store.separator
        prefix = full_path if full_path.endswith(sep) else full_path + sep
        lowered_prefix = prefix.lower()
        lowered_pattern = pattern.lower()

        results = []
        for key in candidates:
            if not key.lower().startswith(lowered_prefix):
                continue
            remainder = key[len(prefix) :]
            if not remainder or (not recursive and sep in remainder):
                continue
            name = paths.get_file_name(key, sep, self.store.alt_separator)
            if fnmatch.fnmatchcase(name.lower(), lowered_pattern):
                results.append(key)
        return sorted(results)

    def get_files(
        self, path: str, pattern: str = "*", recursive: bool = False
    ) -> List[str]:
        """
        List files below a directory.

        Args:
            path: Directory to list
            pattern: Shell-style pattern matched case-insensitively on names
            recursive: Include files in subdirectories

        Returns:
            Sorted list of file paths

        Raises:
            DirectoryNotFoundError: If the directory doesn't exist
        """
        return self._list(path, self.store.all_files, pattern, recursive)

    def get_directories(
        self, path: str, pattern: str = "*", recursive: bool = False
    ) -> List[str]:
        return self._list(path, self.store.all_directories, pattern, recursive)

    def get_file_system_entries(
        self, path: str, pattern: str = "*", recursive: bool = False
    ) -> List[str]:
        return self._list(path, self.store.all_paths, pattern, recursive)

    def get_parent(self, path: str) -> Optional[str]:
        """Get the parent of a directory, or None for a root."""
        return paths.get_directory_name(
            self._resolve(path), self.store.separator, self.store.alt_separator
        )

    def get_current_directory(self) -> str:
        return self.store.current_directory

    def set_current_directory(self, path: str) -> None:
        self.store.current_directory = path
