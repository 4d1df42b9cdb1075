"""Space Scanner - size-annotated directory listings and volume discovery.

This package provides the scanning core of a visual disk-space explorer:
enumerating mounted volumes and listing directories with depth-limited
aggregate sizes, ordered for display.
"""

from space_scanner.core.errors import (
    DirectoryReadError,
    NotADirectoryPathError,
    PathNotFoundError,
    ScanError,
    ScanErrorKind,
)
from space_scanner.core.filesystem import (
    aggregate_size,
    list_directory,
    list_volumes,
)
from space_scanner.types.models import DirectoryEntry, Volume

__all__ = [
    "DirectoryEntry",
    "DirectoryReadError",
    "NotADirectoryPathError",
    "PathNotFoundError",
    "ScanError",
    "ScanErrorKind",
    "Volume",
    "aggregate_size",
    "list_directory",
    "list_volumes",
]
