"""
Centralized exception hierarchy for mockfs.

Every exception also derives from the matching builtin (PermissionError,
FileNotFoundError, ...) so code under test that catches the builtin keeps
working against the in-memory filesystem.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class MockFsError(Exception):
    """Base exception for all mockfs errors."""

    pass


# ============================================================================
# Entry Store Exceptions
# ============================================================================


class AccessDeniedError(MockFsError, PermissionError):
    """Raised when a write targets an entry whose ReadOnly flag is set."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Access to the path '{path}' is denied.")

    def __str__(self) -> str:
        return self.args[0]


# ============================================================================
# Facade Exceptions
# ============================================================================


class EntryNotFoundError(MockFsError, FileNotFoundError):
    """Raised by a facade when the requested entry does not exist."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        super().__init__(message or f"Could not find file '{path}'.")

    def __str__(self) -> str:
        return self.args[0]


class DirectoryNotFoundError(EntryNotFoundError):
    """Raised when a directory operation targets a missing directory."""

    def __init__(self, path: str):
        super().__init__(path, f"Could not find a part of the path '{path}'.")


class EntryExistsError(MockFsError, FileExistsError):
    """Raised when an operation would clobber an existing entry."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The file '{path}' already exists.")

    def __str__(self) -> str:
        return self.args[0]


class DirectoryNotEmptyError(MockFsError, OSError):
    """Raised when deleting a non-empty directory without recursion."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The directory is not empty: '{path}'")

    def __str__(self) -> str:
        return self.args[0]


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(MockFsError):
    """Fixture file parsing or validation error."""

    pass
