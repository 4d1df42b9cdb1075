"""Path-level error taxonomy for directory listing.

Only the top-level path check in ``list_directory`` raises these. Failures
below the listed directory (unreadable children, unreadable subtrees during
size aggregation) are absorbed by the scanner and never surface here.
"""

from enum import StrEnum

from space_scanner.types.aliases import ErrorPayload


class ScanErrorKind(StrEnum):
    """Stable identifiers for path-level scan failures."""

    PATH_NOT_FOUND = "path_not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IO_ERROR = "io_error"


class ScanError(Exception):
    """Base exception for path-level scan failures.

    Attributes:
        kind: Stable error identifier for hosts that transport errors as values
        path: The path the caller asked to list
    """

    kind: ScanErrorKind = ScanErrorKind.IO_ERROR

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path: str = path

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return str(self)

    def to_dict(self) -> ErrorPayload:
        """Return the host-facing representation of this error."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "path": self.path,
        }


class PathNotFoundError(ScanError):
    """Raised when the path to list does not exist."""

    kind = ScanErrorKind.PATH_NOT_FOUND


class NotADirectoryPathError(ScanError):
    """Raised when the path to list exists but is not a directory."""

    kind = ScanErrorKind.NOT_A_DIRECTORY


class DirectoryReadError(ScanError):
    """Raised when the path to list cannot be inspected or opened.

    The message carries the operating system's error text.
    """

    kind = ScanErrorKind.IO_ERROR
