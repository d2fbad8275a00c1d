"""
In-memory filesystem double.

MockFileSystem is an EntryStore with its facades wired over it. One instance
is created per test and discarded with it.

Example:
    >>> from mockfs.core.entry import Entry
    >>> from mockfs.filesystem import MockFileSystem
    >>> fs = MockFileSystem({"/data/users.csv": Entry.file("id,name\\n")})
    >>> fs.file.read_all_text("/DATA/users.csv")
    'id,name\\n'
    >>> fs.directory.get_files("/data")
    ['/data/users.csv']
"""

from pathlib import Path
from typing import Mapping, Optional, Union

from mockfs.config.fixtures import load_fixture
from mockfs.core.settings import StoreSettings
from mockfs.core.entry import Entry
from mockfs.core.store import EntryStore
from mockfs.facades.directory import MockDirectory
from mockfs.facades.file import MockFile
from mockfs.facades.info import DirectoryInfoFactory, FileInfoFactory
from mockfs.facades.path import MockPath


class MockFileSystem(EntryStore):
    """
    Entry store plus file, directory, path-info and path facades.

    Attributes:
        file: File operations
        directory: Directory operations
        file_info: FileInfo factory
        directory_info: DirectoryInfo factory
        path: Path string helpers
    """

    def __init__(
        self,
        files: Optional[Mapping[str, Entry]] = None,
        current_directory: Optional[str] = None,
        settings: Optional[StoreSettings] = None,
    ):
        super().__init__(files, current_directory, settings)
        self._file = MockFile(self)
        self._directory = MockDirectory(self)
        self._file_info = FileInfoFactory(self)
        self._directory_info = DirectoryInfoFactory(self)
        self._path = MockPath(self)

    @classmethod
    def from_fixture(cls, fixture_path: Union[str, Path]) -> "MockFileSystem":
        """
        Create a filesystem from a YAML fixture file.

        Raises:
            ConfigError: If the fixture is missing or invalid
        """
        return load_fixture(fixture_path).build()

    @property
    def file(self) -> MockFile:
        return self._file

    @property
    def directory(self) -> MockDirectory:
        return self._directory

    @property
    def file_info(self) -> FileInfoFactory:
        return self._file_info

    @property
    def directory_info(self) -> DirectoryInfoFactory:
        return self._directory_info

    @property
    def path(self) -> MockPath:
        return self._path
