"""
Path string utilities for mockfs.

All helpers are pure string functions parameterized by a separator pair, so
the same code serves POSIX-style (``/``) and Windows-style (``\\``) fixtures.
Nothing here touches the real filesystem.

Roots are either the bare separator (``/``) or a drive root (``C:/``). Roots
always exist implicitly and are never stored in an entry table.

Example:
    >>> normalize("\\data\\users.csv")
    '/data/users.csv'
    >>> list(ancestors("/a/b/c.txt"))
    ['/a/b', '/a']
"""

from typing import Iterator, Optional

DEFAULT_SEPARATOR = "/"
DEFAULT_ALT_SEPARATOR = "\\"


def _drive(path: str) -> str:
    """Return the ``X:`` drive prefix of a path, or an empty string."""
    if len(path) >= 2 and path[1] == ":" and path[0].isalpha():
        return path[:2]
    return ""


def is_root(
    path: str,
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> bool:
    """Check whether a path is a filesystem root (``/`` or ``C:/``)."""
    if not path:
        return False
    path = path.replace(alt_sep, sep)
    drive = _drive(path)
    return path == sep or (bool(drive) and path == drive + sep)


def normalize(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> str:
    """
    Normalize a path into its table key form.

    Replaces the alternate separator with the primary one and drops trailing
    separators from non-root paths. Casing is left untouched. The function is
    idempotent.

    Args:
        path: Path to normalize (None is treated as empty)
        sep: Primary directory separator
        alt_sep: Alternate directory separator

    Returns:
        Normalized path string
    """
    if not path:
        return ""

    path = path.replace(alt_sep, sep)
    while len(path) > 1 and path.endswith(sep) and not is_root(path, sep, alt_sep):
        path = path[:-1]
    return path


def is_rooted(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> bool:
    """Check whether a path starts at a root rather than being relative."""
    if not path:
        return False
    path = path.replace(alt_sep, sep)
    return path.startswith(sep) or bool(_drive(path))


def get_path_root(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> str:
    """
    Get the root portion of a path.

    Returns:
        ``/`` or ``C:/`` for rooted paths, ``C:`` for drive-relative paths,
        and an empty string for relative paths
    """
    if not path:
        return ""
    path = path.replace(alt_sep, sep)
    drive = _drive(path)
    if drive:
        return drive + sep if path[2:3] == sep else drive
    if path.startswith(sep):
        return sep
    return ""


def get_directory_name(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> Optional[str]:
    """
    Get the parent directory of a path.

    Args:
        path: Path to inspect

    Returns:
        Parent directory path, an empty string for a bare relative name, or
        None when the path is empty or already a root

    Example:
        >>> get_directory_name("/a/b.txt")
        '/a'
        >>> get_directory_name("/a")
        '/'
    """
    path = normalize(path, sep, alt_sep)
    if not path or is_root(path, sep, alt_sep):
        return None

    root = get_path_root(path, sep, alt_sep)
    index = path.rfind(sep)
    if index < len(root):
        return root
    return normalize(path[:index], sep, alt_sep)


def get_file_name(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> str:
    """Get the final segment of a path (empty when it ends in a separator)."""
    if not path:
        return ""
    path = path.replace(alt_sep, sep)
    name = path[path.rfind(sep) + 1 :]
    drive = _drive(name)
    return name[len(drive) :]


def get_extension(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> str:
    """Get the extension of a path including the leading dot."""
    name = get_file_name(path, sep, alt_sep)
    index = name.rfind(".")
    if index == -1 or index == len(name) - 1:
        return ""
    return name[index:]


def get_file_name_without_extension(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> str:
    name = get_file_name(path, sep, alt_sep)
    index = name.rfind(".")
    return name[:index] if index != -1 else name


def has_extension(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> bool:
    return bool(get_extension(path, sep, alt_sep))


def combine(
    *parts: str, sep: str = DEFAULT_SEPARATOR, alt_sep: str = DEFAULT_ALT_SEPARATOR
) -> str:
    """
    Join path segments.

    A rooted segment discards everything joined before it, matching how
    ``os.path.join`` treats absolute components.
    """
    result = ""
    for part in parts:
        if not part:
            continue
        if is_rooted(part, sep, alt_sep):
            result = part
        elif not result or result.endswith(sep) or result.endswith(alt_sep):
            result += part
        else:
            result += sep + part
    return result


def get_full_path(
    path: str,
    base: str,
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> str:
    """
    Resolve a path against a base directory.

    Relative paths are joined onto ``base``; ``.`` and ``..`` segments are
    collapsed. ``..`` never climbs above the root.

    Args:
        path: Path to resolve
        base: Directory used for relative paths (usually the current directory)

    Returns:
        Normalized, resolved path

    Example:
        >>> get_full_path("../c.txt", "/a/b")
        '/a/c.txt'
    """
    path = normalize(path, sep, alt_sep)
    if not path:
        return ""
    if not is_rooted(path, sep, alt_sep):
        path = normalize(combine(base, path, sep=sep, alt_sep=alt_sep), sep, alt_sep)

    root = get_path_root(path, sep, alt_sep)
    segments: list[str] = []
    for segment in path[len(root) :].split(sep):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)

    return normalize(root + sep.join(segments), sep, alt_sep)


def ancestors(
    path: Optional[str],
    sep: str = DEFAULT_SEPARATOR,
    alt_sep: str = DEFAULT_ALT_SEPARATOR,
) -> Iterator[str]:
    """
    Iterate over the ancestor directories of a path, nearest first.

    Roots and the empty relative base are not yielded.
    """
    parent = get_directory_name(path, sep, alt_sep)
    while parent and not is_root(parent, sep, alt_sep):
        yield parent
        parent = get_directory_name(parent, sep, alt_sep)
