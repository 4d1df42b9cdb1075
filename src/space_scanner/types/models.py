"""Data models for space-scanner.

This module defines immutable dataclasses returned by the scanning core.
Every instance is a fresh snapshot of filesystem state at call time; nothing
is cached between calls.
"""

from dataclasses import dataclass

from space_scanner.types.aliases import EntryPayload, VolumePayload


@dataclass(slots=True, frozen=True)
class Volume:
    """Immutable snapshot of a mounted storage device or partition.

    Capacity fields are zero when the discovery strategy that produced the
    volume cannot determine them (e.g. mount-point probing).
    """

    name: str
    mount_path: str
    total_bytes: int
    available_bytes: int

    def to_dict(self) -> VolumePayload:
        """Return the host-facing representation of this volume."""
        return {
            "name": self.name,
            "mount_path": self.mount_path,
            "total_bytes": self.total_bytes,
            "available_bytes": self.available_bytes,
        }


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """Immutable snapshot of one child of a listed directory.

    For files, ``size_bytes`` is the exact byte length. For directories it is
    the depth-limited aggregate computed by
    :func:`space_scanner.core.filesystem.size_aggregator.aggregate_size`.
    """

    name: str
    path: str
    is_directory: bool
    size_bytes: int

    def to_dict(self) -> EntryPayload:
        """Return the host-facing representation of this entry."""
        return {
            "name": self.name,
            "path": self.path,
            "is_directory": self.is_directory,
            "size_bytes": self.size_bytes,
        }
