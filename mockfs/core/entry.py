"""
Entries stored in the mockfs path table.

An Entry is a tagged union: ``kind`` is the discriminant (File or Directory)
and the remaining fields are the payload. Directories carry attributes and
timestamps only; their ``contents`` is always empty.

Example:
    >>> from mockfs.core.entry import Entry, FileAttributes
    >>> entry = Entry.file("id,name\\n", attributes=FileAttributes.READ_ONLY)
    >>> entry.is_read_only
    True
    >>> Entry.directory().is_directory
    True
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union

DEFAULT_ENCODING = "utf-8"

# Windows FILETIME epoch, used for the timestamps of the null entry.
NULL_TIMESTAMP = datetime(1601, 1, 1, tzinfo=timezone.utc)


class FileAttributes(enum.IntFlag):
    """Attribute flags of an entry (values follow the Win32 constants)."""

    READ_ONLY = 0x1
    HIDDEN = 0x2
    SYSTEM = 0x4
    DIRECTORY = 0x10
    ARCHIVE = 0x20
    NORMAL = 0x80
    TEMPORARY = 0x100


class EntryKind(enum.Enum):
    """Discriminant of the Entry union."""

    FILE = "file"
    DIRECTORY = "directory"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Entry:
    """
    A stored file or directory.

    Attributes:
        kind: File or Directory variant
        contents: Raw file bytes (always empty for directories)
        attributes: Attribute flags, READ_ONLY among them
        creation_time: When the entry was created
        last_access_time: When the contents were last read
        last_write_time: When the contents were last written
    """

    kind: EntryKind
    contents: bytes = b""
    attributes: FileAttributes = FileAttributes.NORMAL
    creation_time: datetime = field(default_factory=_now)
    last_access_time: datetime = field(default_factory=_now)
    last_write_time: datetime = field(default_factory=_now)

    @classmethod
    def file(
        cls,
        contents: Union[bytes, str] = b"",
        encoding: str = DEFAULT_ENCODING,
        attributes: FileAttributes = FileAttributes.NORMAL,
    ) -> "Entry":
        """
        Create a File entry.

        Args:
            contents: Raw bytes, or text encoded with ``encoding``
            encoding: Encoding used when ``contents`` is a string
            attributes: Attribute flags for the new file

        Returns:
            New File entry
        """
        if isinstance(contents, str):
            contents = contents.encode(encoding)
        return cls(kind=EntryKind.FILE, contents=bytes(contents), attributes=attributes)

    @classmethod
    def directory(
        cls, attributes: FileAttributes = FileAttributes.DIRECTORY
    ) -> "Entry":
        """Create an empty Directory entry."""
        return cls(
            kind=EntryKind.DIRECTORY, attributes=attributes | FileAttributes.DIRECTORY
        )

    @classmethod
    def null(cls) -> "Entry":
        """
        Create the placeholder returned for absent paths.

        Callers that only inspect metadata use it to avoid branching on
        existence. A new instance is returned on every call so mutating one
        never leaks into another lookup.
        """
        return cls(
            kind=EntryKind.FILE,
            attributes=FileAttributes.NORMAL,
            creation_time=NULL_TIMESTAMP,
            last_access_time=NULL_TIMESTAMP,
            last_write_time=NULL_TIMESTAMP,
        )

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_read_only(self) -> bool:
        return bool(self.attributes & FileAttributes.READ_ONLY)

    def text(self, encoding: str = DEFAULT_ENCODING) -> str:
        """Decode the contents as text."""
        return self.contents.decode(encoding)

    def set_contents(
        self, contents: Union[bytes, str], encoding: Optional[str] = None
    ) -> None:
        """
        Replace the contents in place and bump the write timestamp.

        Raises:
            ValueError: If the entry is a directory
        """
        if self.is_directory:
            raise ValueError("Directory entries have no contents")
        if isinstance(contents, str):
            contents = contents.encode(encoding or DEFAULT_ENCODING)
        self.contents = bytes(contents)
        self.last_write_time = _now()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "type": self.kind.value,
            "size": len(self.contents),
            "attributes": [flag.name.lower() for flag in FileAttributes if flag in self.attributes],
            "creation_time": self.creation_time.isoformat(),
            "last_access_time": self.last_access_time.isoformat(),
            "last_write_time": self.last_write_time.isoformat(),
        }
