"""
Unit tests for the Entry model.
"""

import pytest

from mockfs.core.entry import (
    NULL_TIMESTAMP,
    Entry,
    EntryKind,
    FileAttributes,
)


class TestFileEntry:
    """Tests for File entries."""

    def test_text_contents_encoded_utf8(self):
        """Test that text contents are encoded as UTF-8 by default."""
        entry = Entry.file("héllo")

        assert entry.contents == "héllo".encode("utf-8")
        assert entry.text() == "héllo"

    def test_custom_encoding(self):
        """Test text contents with an explicit encoding."""
        entry = Entry.file("x", encoding="utf-16")

        assert entry.contents == "x".encode("utf-16")
        assert entry.text("utf-16") == "x"

    def test_bytes_contents(self):
        """Test raw byte contents."""
        entry = Entry.file(b"\x00\xff")

        assert entry.contents == b"\x00\xff"
        assert entry.kind is EntryKind.FILE
        assert entry.is_file
        assert not entry.is_directory

    def test_default_attributes(self):
        """Test that files default to NORMAL."""
        assert Entry.file().attributes == FileAttributes.NORMAL
        assert not Entry.file().is_read_only

    def test_read_only(self):
        """Test the read-only flag."""
        entry = Entry.file("x", attributes=FileAttributes.READ_ONLY | FileAttributes.HIDDEN)

        assert entry.is_read_only

    def test_set_contents(self):
        """Test in-place content replacement."""
        entry = Entry.file("old")
        before = entry.last_write_time

        entry.set_contents("new")

        assert entry.text() == "new"
        assert entry.last_write_time >= before

    def test_set_contents_bytes(self):
        """Test in-place replacement with bytes."""
        entry = Entry.file("old")

        entry.set_contents(b"\x01")

        assert entry.contents == b"\x01"


class TestDirectoryEntry:
    """Tests for Directory entries."""

    def test_directory(self):
        """Test a plain directory entry."""
        entry = Entry.directory()

        assert entry.kind is EntryKind.DIRECTORY
        assert entry.is_directory
        assert not entry.is_file
        assert entry.contents == b""
        assert entry.attributes & FileAttributes.DIRECTORY

    def test_directory_flag_always_set(self):
        """Test that custom attributes keep the DIRECTORY flag."""
        entry = Entry.directory(FileAttributes.HIDDEN)

        assert entry.attributes == FileAttributes.HIDDEN | FileAttributes.DIRECTORY

    def test_set_contents_rejected(self):
        """Test that directories cannot hold contents."""
        with pytest.raises(ValueError):
            Entry.directory().set_contents("x")


class TestNullEntry:
    """Tests for the null entry."""

    def test_shape(self):
        """Test the null entry's fields."""
        entry = Entry.null()

        assert entry.is_file
        assert entry.contents == b""
        assert entry.attributes == FileAttributes.NORMAL
        assert entry.creation_time == NULL_TIMESTAMP
        assert entry.last_access_time == NULL_TIMESTAMP
        assert entry.last_write_time == NULL_TIMESTAMP

    def test_fresh_instances(self):
        """Test that each call returns a separate instance."""
        first = Entry.null()
        first.attributes = FileAttributes.READ_ONLY

        second = Entry.null()

        assert first is not second
        assert not second.is_read_only


class TestToDict:
    """Tests for Entry.to_dict()."""

    def test_file(self):
        """Test conversion of a file entry."""
        data = Entry.file("abc", attributes=FileAttributes.READ_ONLY).to_dict()

        assert data["type"] == "file"
        assert data["size"] == 3
        assert data["attributes"] == ["read_only"]
        assert "creation_time" in data

    def test_directory(self):
        """Test conversion of a directory entry."""
        data = Entry.directory().to_dict()

        assert data["type"] == "directory"
        assert data["size"] == 0
        assert data["attributes"] == ["directory"]
