"""Path string facade bound to a store's separators and current directory."""

from typing import Optional

from mockfs.core import paths
from mockfs.core.store import EntryStore


class MockPath:
    """Path helpers using the separator pair of one store."""

    def __init__(self, store: EntryStore):
        self.store = store

    @property
    def directory_separator_char(self) -> str:
        return self.store.separator

    @property
    def alt_directory_separator_char(self) -> str:
        return self.store.alt_separator

    def combine(self, *parts: str) -> str:
        return paths.combine(
            *parts, sep=self.store.separator, alt_sep=self.store.alt_separator
        )

    def get_directory_name(self, path: str) -> Optional[str]:
        return paths.get_directory_name(
            path, self.store.separator, self.store.alt_separator
        )

    def get_file_name(self, path: str) -> str:
        return paths.get_file_name(path, self.store.separator, self.store.alt_separator)

    def get_extension(self, path: str) -> str:
        return paths.get_extension(path, self.store.separator, self.store.alt_separator)

    def get_file_name_without_extension(self, path: str) -> str:
        return paths.get_file_name_without_extension(
            path, self.store.separator, self.store.alt_separator
        )

    def has_extension(self, path: str) -> bool:
        return paths.has_extension(path, self.store.separator, self.store.alt_separator)

    def get_full_path(self, path: str) -> str:
        """Resolve a path against the store's current directory."""
        return self.store.get_full_path(path)

    def is_path_rooted(self, path: str) -> bool:
        return paths.is_rooted(path, self.store.separator, self.store.alt_separator)

    def get_path_root(self, path: str) -> str:
        return paths.get_path_root(path, self.store.separator, self.store.alt_separator)
