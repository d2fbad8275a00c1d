"""YAML fixture files for mockfs.

A fixture describes the initial contents of a mock filesystem:

    version: 1
    current_directory: /work
    entries:
      - path: /data/users.csv
        content: "id,name\\n"
        attributes: [read_only]
      - path: /empty
        type: directory
      - path: /bin/blob
        content_base64: AAEC

Files are seeded through the store's normal insert path, so ancestors are
created and read-only rules apply exactly as for runtime writes.
"""

import base64
import binascii
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Union

import yaml

from mockfs.core.settings import StoreSettings
from mockfs.core.entry import DEFAULT_ENCODING, Entry, FileAttributes
from mockfs.core.exceptions import ConfigError

if TYPE_CHECKING:
    from mockfs.core.store import EntryStore
    from mockfs.filesystem import MockFileSystem

logger = logging.getLogger(__name__)

FIXTURE_VERSION = 1

ENTRY_TYPES = ("file", "directory")

# Flags implied by the entry type; never written to or read from fixtures.
_IMPLICIT_ATTRIBUTES = FileAttributes.DIRECTORY | FileAttributes.NORMAL


@dataclass
class Fixture:
    """
    Parsed fixture file.

    Attributes:
        settings: Separators and current directory for the store
        files: File entries keyed by path, in file order
        directories: Explicit directories keyed by path, with their attributes
    """

    settings: StoreSettings = field(default_factory=StoreSettings)
    files: Dict[str, Entry] = field(default_factory=dict)
    directories: Dict[str, FileAttributes] = field(default_factory=dict)

    def build(self) -> "MockFileSystem":
        """
        Create a mock filesystem populated from this fixture.

        Files are inserted first; explicit directories are created afterwards
        so their attributes are applied on top of implicitly created ones.
        """
        from mockfs.filesystem import MockFileSystem

        fs = MockFileSystem(settings=self.settings)
        for path, entry in self.files.items():
            fs.add_file(fs.get_full_path(path), entry)
        for path, attributes in self.directories.items():
            entry = fs.get_file(fs.directory.create_directory(path))
            if entry is not None:
                entry.attributes = attributes | FileAttributes.DIRECTORY

        logger.debug(
            f"Built filesystem from fixture: {len(self.files)} files, "
            f"{len(self.directories)} directories"
        )
        return fs


def load_fixture(fixture_path: Union[str, Path]) -> Fixture:
    """
    Load a fixture from a YAML file.

    Args:
        fixture_path: Path to the fixture file on the real filesystem

    Returns:
        Parsed fixture

    Raises:
        ConfigError: If the file is missing or invalid
    """
    fixture_path = Path(fixture_path)
    if not fixture_path.exists():
        raise ConfigError(f"Fixture file not found: {fixture_path}")

    try:
        with open(fixture_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        raise ConfigError("Fixture file is empty")

    return parse_fixture(data)


def parse_fixture(data: dict) -> Fixture:
    """
    Parse and validate fixture data.

    Raises:
        ConfigError: If the data is invalid
    """
    if not isinstance(data, dict):
        raise ConfigError("Fixture must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")
    if data["version"] != FIXTURE_VERSION:
        raise ConfigError(
            f"Unsupported version: {data['version']} (expected {FIXTURE_VERSION})"
        )

    defaults = StoreSettings()
    settings = StoreSettings(
        separator=data.get("separator", defaults.separator),
        alt_separator=data.get("alt_separator", defaults.alt_separator),
        current_directory=data.get("current_directory", defaults.current_directory),
    )

    entries = data.get("entries") or []
    if not isinstance(entries, list):
        raise ConfigError("'entries' must be a list")

    fixture = Fixture(settings=settings)
    seen = set()
    for index, item in enumerate(entries):
        if not isinstance(item, dict):
            raise ConfigError(f"Entry {index} must be a mapping")

        path = item.get("path")
        if not path or not isinstance(path, str):
            raise ConfigError(f"Entry {index}: missing required field 'path'")

        key = path.replace(settings.alt_separator, settings.separator).lower()
        if key in seen:
            raise ConfigError(f"Duplicate entry path: {path}")
        seen.add(key)

        entry_type = item.get("type", "file")
        if entry_type not in ENTRY_TYPES:
            raise ConfigError(
                f"Entry {path}: invalid type '{entry_type}' "
                f"(expected one of {', '.join(ENTRY_TYPES)})"
            )

        attributes = _parse_attributes(path, item.get("attributes", []))
        if entry_type == "directory":
            if "content" in item or "content_base64" in item:
                raise ConfigError(f"Entry {path}: directories cannot have content")
            fixture.directories[path] = attributes | FileAttributes.DIRECTORY
        else:
            contents = _parse_contents(path, item)
            fixture.files[path] = Entry.file(
                contents, attributes=attributes or FileAttributes.NORMAL
            )

    return fixture


def _parse_attributes(path: str, names) -> FileAttributes:
    if not isinstance(names, list):
        raise ConfigError(f"Entry {path}: 'attributes' must be a list")

    attributes = FileAttributes(0)
    for name in names:
        try:
            attributes |= FileAttributes[str(name).upper()]
        except KeyError:
            valid = ", ".join(flag.name.lower() for flag in FileAttributes)
            raise ConfigError(
                f"Entry {path}: unknown attribute '{name}' (expected one of {valid})"
            ) from None
    return attributes


def _parse_contents(path: str, item: dict) -> bytes:
    if "content" in item and "content_base64" in item:
        raise ConfigError(f"Entry {path}: use either 'content' or 'content_base64'")

    if "content_base64" in item:
        try:
            return base64.b64decode(str(item["content_base64"]), validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConfigError(f"Entry {path}: invalid base64 content: {e}") from e

    content = item.get("content", "")
    if not isinstance(content, str):
        raise ConfigError(f"Entry {path}: 'content' must be a string")
    encoding = item.get("encoding", DEFAULT_ENCODING)
    try:
        return content.encode(encoding)
    except LookupError as e:
        raise ConfigError(f"Entry {path}: unknown encoding '{encoding}'") from e


def _attribute_names(attributes: FileAttributes) -> list:
    return [
        flag.name.lower()
        for flag in FileAttributes
        if flag in attributes and flag not in _IMPLICIT_ATTRIBUTES
    ]


def fixture_data(store: "EntryStore") -> dict:
    """
    Describe a store's table as fixture data.

    File contents that decode as UTF-8 are written as text, everything else as
    base64. Entries are sorted by path.
    """
    entries = []
    for path in sorted(store.all_paths, key=str.lower):
        entry = store.get_file(path)
        item: dict = {"path": path}
        if entry.is_directory:
            item["type"] = "directory"
        else:
            try:
                item["content"] = entry.contents.decode(DEFAULT_ENCODING)
            except UnicodeDecodeError:
                item["content_base64"] = base64.b64encode(entry.contents).decode("ascii")
        names = _attribute_names(entry.attributes)
        if names:
            item["attributes"] = names
        entries.append(item)

    return {
        "version": FIXTURE_VERSION,
        "separator": store.separator,
        "alt_separator": store.alt_separator,
        "current_directory": store.current_directory,
        "entries": entries,
    }


def dump_fixture(store: "EntryStore", fixture_path: Union[str, Path]) -> None:
    """
    Write a store's table to a YAML fixture file.

    Args:
        store: Store to describe
        fixture_path: Destination on the real filesystem
    """
    fixture_path = Path(fixture_path)
    with open(fixture_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(
            fixture_data(store), f, default_flow_style=False, sort_keys=False
        )
    logger.debug(f"Wrote fixture with {len(store)} entries to {fixture_path}")
