"""Settings that shape how an entry store interprets paths."""

from dataclasses import dataclass

from mockfs.core.exceptions import ConfigError
from mockfs.core.paths import DEFAULT_ALT_SEPARATOR, DEFAULT_SEPARATOR


@dataclass(frozen=True)
class StoreSettings:
    """
    Path conventions for an entry store.

    Attributes:
        separator: Primary directory separator, used in stored keys
        alt_separator: Alternate separator, rewritten to ``separator``
        current_directory: Directory used to resolve relative paths
    """

    separator: str = DEFAULT_SEPARATOR
    alt_separator: str = DEFAULT_ALT_SEPARATOR
    current_directory: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        if len(self.separator) != 1 or len(self.alt_separator) != 1:
            raise ConfigError(
                f"Separators must be single characters, got "
                f"{self.separator!r} and {self.alt_separator!r}"
            )
        if self.separator == self.alt_separator:
            raise ConfigError(
                f"Separator and alternate separator must differ: {self.separator!r}"
            )
        if not self.current_directory:
            raise ConfigError("Current directory must not be empty")

    @classmethod
    def windows(cls, current_directory: str = "C:\\") -> "StoreSettings":
        """Settings with backslash keys, as a Windows filesystem stores them."""
        return cls(
            separator="\\", alt_separator="/", current_directory=current_directory
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {
            "separator": self.separator,
            "alt_separator": self.alt_separator,
            "current_directory": self.current_directory,
        }
