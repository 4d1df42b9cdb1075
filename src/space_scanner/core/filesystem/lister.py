"""Directory listing with size annotation.

This module lists the immediate children of a directory for display in a
disk-space explorer:
- Hidden children (leading ``.``) are dropped
- Children whose metadata cannot be read are dropped silently
- Files are sized by byte length, directories by depth-limited aggregation
- Results are ordered directories first, then by descending size

Only the top-level path check can fail the call; everything below it is
best-effort.
"""

import logging
import os
import stat
from pathlib import Path

from space_scanner.core.errors import (
    DirectoryReadError,
    NotADirectoryPathError,
    PathNotFoundError,
)
from space_scanner.core.filesystem.size_aggregator import aggregate_size, is_hidden
from space_scanner.core.filesystem.sort_policy import sort_entries
from space_scanner.types.models import DirectoryEntry

logger = logging.getLogger(__name__)


def _check_directory(dir_path: Path) -> None:
    """Validate that ``dir_path`` exists and is a directory.

    Symlinks are followed, so a link to a directory is listable.

    Raises:
        PathNotFoundError: If nothing exists at ``dir_path``
        NotADirectoryPathError: If ``dir_path`` exists but is not a directory
        DirectoryReadError: If ``dir_path`` cannot be inspected
    """
    try:
        st = dir_path.stat()
    except (FileNotFoundError, NotADirectoryError) as exc:
        # NotADirectoryError: a parent component is a regular file
        msg = f"Path does not exist: {dir_path}"
        raise PathNotFoundError(msg, path=str(dir_path)) from exc
    except OSError as exc:
        msg = f"Cannot access path: {dir_path}: {exc.strerror or exc}"
        raise DirectoryReadError(msg, path=str(dir_path)) from exc

    if not stat.S_ISDIR(st.st_mode):
        msg = f"Path is not a directory: {dir_path}"
        raise NotADirectoryPathError(msg, path=str(dir_path))


def _build_entry(entry: os.DirEntry[str]) -> DirectoryEntry | None:
    """Create a DirectoryEntry for one child, or None if it must be skipped."""
    if is_hidden(entry.name):
        return None

    try:
        st = entry.stat(follow_symlinks=False)
    except OSError as exc:
        logger.debug(
            "Cannot read entry metadata, omitting from listing",
            extra={"path": entry.path, "error": str(exc)},
        )
        return None

    is_directory = stat.S_ISDIR(st.st_mode)
    size = aggregate_size(entry.path, depth=0) if is_directory else st.st_size

    return DirectoryEntry(
        name=entry.name,
        path=entry.path,
        is_directory=is_directory,
        size_bytes=size,
    )


def list_directory(path: str | os.PathLike[str]) -> list[DirectoryEntry]:
    """List the visible children of a directory with their sizes.

    Args:
        path: Directory to list; relative paths are made absolute

    Returns:
        Entries ordered directories first, then by descending size. An
        empty directory (or one containing only hidden entries) yields an
        empty list.

    Raises:
        PathNotFoundError: If ``path`` does not exist or is empty
        NotADirectoryPathError: If ``path`` is not a directory
        DirectoryReadError: If ``path`` cannot be inspected or opened

    Examples:
        >>> entries = list_directory("/srv/data")
        >>> [(e.name, e.is_directory, e.size_bytes) for e in entries]
        [('docs', True, 10), ('c.txt', False, 5)]
    """
    raw_path = os.fspath(path)
    if not raw_path:
        # Path("") would resolve to the working directory
        msg = "Path does not exist: empty path"
        raise PathNotFoundError(msg, path=raw_path)

    dir_path = Path(raw_path).absolute()
    _check_directory(dir_path)

    logger.info("Listing directory", extra={"path": str(dir_path)})

    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(dir_path) as children:
            for child in children:
                built = _build_entry(child)
                if built is not None:
                    entries.append(built)
    except OSError as exc:
        msg = f"Failed to read directory: {dir_path}: {exc.strerror or exc}"
        raise DirectoryReadError(msg, path=str(dir_path)) from exc

    logger.info(
        "Directory listed",
        extra={
            "path": str(dir_path),
            "entries": len(entries),
            "directories": sum(1 for e in entries if e.is_directory),
        },
    )
    return sort_entries(entries)
