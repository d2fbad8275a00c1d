"""
Facades over the entry store.

Each facade receives the store it operates on; none of them keeps state of
its own beyond that reference.
"""

from .directory import MockDirectory
from .file import MockFile
from .info import DirectoryInfo, DirectoryInfoFactory, FileInfo, FileInfoFactory
from .path import MockPath

__all__ = [
    "MockDirectory",
    "MockFile",
    "FileInfo",
    "DirectoryInfo",
    "FileInfoFactory",
    "DirectoryInfoFactory",
    "MockPath",
]
