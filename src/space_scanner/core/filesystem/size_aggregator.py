"""Depth-limited directory size aggregation.

Sizes are computed as a sequential depth-first fold with an explicit depth
parameter. Content more than ``MAX_AGGREGATION_DEPTH`` levels below the
starting directory contributes nothing, which keeps the cost of sizing one
listed directory bounded by the number of entries in that shallow subtree.

Aggregation is best-effort: unreadable directories and entries whose
metadata cannot be read contribute 0 and never raise.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Final

logger = logging.getLogger(__name__)

# Deepest recursion level that still contributes bytes. A call made with
# depth=0 on a listed directory counts files up to three nested
# subdirectories below it.
MAX_AGGREGATION_DEPTH: Final[int] = 3

# Entries whose names start with this prefix are hidden: never listed,
# never counted, never descended into.
HIDDEN_PREFIX: Final[str] = "."


def is_hidden(name: str) -> bool:
    """Check whether a filesystem entry name denotes a hidden entry.

    Args:
        name: Final path component (not a full path)

    Returns:
        True if the entry is hidden and must be ignored

    Examples:
        >>> is_hidden(".git")
        True
        >>> is_hidden("docs")
        False
    """
    return name.startswith(HIDDEN_PREFIX)


def aggregate_size(dir_path: str | os.PathLike[str], depth: int = 0) -> int:
    """Sum regular-file sizes below a directory, up to a fixed depth.

    Each child of ``dir_path`` is inspected without following symlinks:

    - hidden entries contribute 0 and are not descended into
    - regular files contribute their byte length
    - directories recurse with ``depth + 1``
    - anything else (symlinks, sockets, devices) contributes 0

    Args:
        dir_path: Directory to aggregate
        depth: Current recursion depth; callers sizing a listed directory pass 0

    Returns:
        Total size in bytes (always >= 0). Returns 0 when ``depth`` exceeds
        ``MAX_AGGREGATION_DEPTH`` or when ``dir_path`` cannot be read.
    """
    if depth > MAX_AGGREGATION_DEPTH:
        return 0

    total = 0
    try:
        with os.scandir(dir_path) as entries:
            for entry in entries:
                if is_hidden(entry.name):
                    continue

                try:
                    st = entry.stat(follow_symlinks=False)
                except OSError as exc:
                    logger.debug(
                        "Cannot read entry metadata, skipping",
                        extra={"path": entry.path, "error": str(exc)},
                    )
                    continue

                if stat.S_ISREG(st.st_mode):
                    total += st.st_size
                elif stat.S_ISDIR(st.st_mode):
                    total += aggregate_size(entry.path, depth + 1)
    except OSError as exc:
        # Permission denied, removed during traversal, I/O error
        logger.debug(
            "Cannot read directory, counting as empty",
            extra={"path": str(Path(dir_path)), "depth": depth, "error": str(exc)},
        )
        return 0

    return total
