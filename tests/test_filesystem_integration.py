"""
Integration tests for the mock filesystem.

Tests real-world scenarios that combine the store, its facades and YAML
fixtures the way code under test would use them.
"""

import pytest

from mockfs.core.entry import FileAttributes
from mockfs.core.exceptions import AccessDeniedError, EntryNotFoundError
from mockfs.filesystem import MockFileSystem


# ============================================================================
# Integration Test Scenarios
# ============================================================================


class TestBuildOutputWorkflow:
    """Test a build step that writes, lists and cleans its output."""

    def test_write_list_clean(self, seeded_fs):
        out = seeded_fs.directory.create_directory("build/out")
        for name in ("a.o", "b.o", "app"):
            seeded_fs.file.write_all_bytes(seeded_fs.path.combine(out, name), b"\x7fELF")

        assert seeded_fs.directory.get_files("build", pattern="*.o", recursive=True) == [
            "/project/build/out/a.o",
            "/project/build/out/b.o",
        ]

        seeded_fs.directory.delete("build", recursive=True)

        assert not seeded_fs.directory.exists("build")
        assert seeded_fs.file.exists("src/main.py")

    def test_log_append(self, mock_fs):
        """Test appending to a log that does not exist yet."""
        mock_fs.file.append_all_text("/var/log/app.log", "start\n")
        mock_fs.file.append_all_text("/VAR/LOG/APP.LOG", "stop\n")

        assert mock_fs.file.read_all_lines("/var/log/app.log") == ["start", "stop"]
        assert mock_fs.all_directories == {"/var", "/var/log"}


class TestReadOnlyWorkflow:
    """Test protecting and unprotecting a file."""

    def test_unlock_then_write(self, seeded_fs):
        with pytest.raises(AccessDeniedError):
            seeded_fs.file.write_all_text("locked.cfg", "key=other\n")

        seeded_fs.file.set_attributes("locked.cfg", FileAttributes.NORMAL)
        seeded_fs.file.write_all_text("locked.cfg", "key=other\n")

        assert seeded_fs.file.read_all_text("locked.cfg") == "key=other\n"

    def test_copy_keeps_read_only(self, seeded_fs):
        seeded_fs.file.copy("locked.cfg", "backup.cfg")

        assert seeded_fs.file_info.from_file_name("backup.cfg").is_read_only
        with pytest.raises(AccessDeniedError):
            seeded_fs.file.copy("README.md", "backup.cfg", overwrite=True)

    def test_copy_onto_directory(self, seeded_fs):
        with pytest.raises(AccessDeniedError):
            seeded_fs.file.copy("README.md", "src", overwrite=True)

        assert seeded_fs.directory.exists("src")


class TestRenameWorkflow:
    """Test moving files between directories."""

    def test_move_to_new_directory(self, seeded_fs):
        before = seeded_fs.get_file("/project/docs/guide.txt")

        seeded_fs.file.move("docs/guide.txt", "archive/2024/guide.txt")

        assert not seeded_fs.file.exists("docs/guide.txt")
        assert seeded_fs.get_file("/project/archive/2024/guide.txt") is before
        assert seeded_fs.directory.get_directories("archive") == ["/project/archive/2024"]

    def test_move_missing(self, seeded_fs):
        with pytest.raises(EntryNotFoundError):
            seeded_fs.file.move("nope.txt", "other.txt")


class TestFixtureWorkflow:
    """Test capturing a filesystem as a fixture and restoring it."""

    def test_capture_and_restore(self, mock_fs, tmp_path):
        from mockfs.config import dump_fixture

        mock_fs.file.write_all_text("/etc/app.conf", "debug=true\n")
        mock_fs.file.write_all_bytes("/var/cache/blob", bytes(range(256)))
        mock_fs.directory.create_directory("/tmp")
        fixture_file = tmp_path / "capture.yaml"

        dump_fixture(mock_fs, fixture_file)
        restored = MockFileSystem.from_fixture(fixture_file)

        assert restored.all_paths == mock_fs.all_paths
        assert restored.file.read_all_bytes("/var/cache/blob") == bytes(range(256))
        assert restored.directory.exists("/tmp")


class TestLogging:
    """Test the debug trail a workflow leaves behind."""

    def test_implicit_directories_logged(self, mock_fs, debug_logging):
        mock_fs.file.write_all_text("/a/b/c.txt", "x")

        messages = [record.getMessage() for record in debug_logging.records]
        assert "Implicitly created directory /a" in messages
        assert "Implicitly created directory /a/b" in messages

    def test_denied_write_logged(self, seeded_fs, debug_logging):
        with pytest.raises(AccessDeniedError):
            seeded_fs.file.write_all_text("locked.cfg", "x")

        assert any(
            record.levelname == "WARNING" and "/project/locked.cfg" in record.getMessage()
            for record in debug_logging.records
        )
