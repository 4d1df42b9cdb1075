"""Storage volume discovery.

This module enumerates mounted volumes through interchangeable strategies
that all satisfy the :class:`~space_scanner.types.protocols.VolumeDiscovery`
protocol:
- The OS partition table via psutil, with real capacity figures
- Platform probes of well-known mount points or drive letters, used as a
  fallback with zero-filled capacity

:func:`list_volumes` picks a strategy for the running platform on every call
and never raises: any discovery failure degrades to an empty list.
"""

import logging
import os
import string
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

import psutil

from space_scanner.types.models import Volume
from space_scanner.types.protocols import VolumeDiscovery

logger = logging.getLogger(__name__)

# Mount points probed on Linux and other POSIX systems
POSIX_MOUNT_POINTS: Final[tuple[str, ...]] = ("/", "/home", "/mnt", "/media")

# Directory under which macOS mounts every volume
MACOS_VOLUMES_DIR: Final[Path] = Path("/Volumes")

# Drive letters probed on Windows
WINDOWS_DRIVE_LETTERS: Final[str] = string.ascii_uppercase


def format_volume_name(mount_path: str, label: str | None = None) -> str:
    """Build a display name from a mount path and optional native label.

    Examples:
        >>> format_volume_name("/", "/dev/sda1")
        '/ (/dev/sda1)'
        >>> format_volume_name("/mnt")
        '/mnt'
    """
    if label and label != mount_path:
        return f"{mount_path} ({label})"
    return mount_path


class PartitionTableDiscovery:
    """Discover volumes from the operating system's partition table.

    Uses ``psutil.disk_partitions`` for the mount table and
    ``psutil.disk_usage`` for capacity. A partition whose usage cannot be
    read is still reported, with zero capacity.
    """

    def __init__(self, *, all_partitions: bool = False) -> None:
        """Initialize the discovery strategy.

        Args:
            all_partitions: Include pseudo, memory and duplicate filesystems
        """
        self.all_partitions: bool = all_partitions

    def discover(self) -> list[Volume]:
        volumes: list[Volume] = []
        seen: set[str] = set()

        for partition in psutil.disk_partitions(all=self.all_partitions):
            mount_path = partition.mountpoint
            if not mount_path or mount_path in seen:
                continue
            seen.add(mount_path)

            total = available = 0
            try:
                usage = psutil.disk_usage(mount_path)
                total, available = usage.total, usage.free
            except (OSError, RuntimeError, SystemError, psutil.Error) as exc:
                # Unready removable media or a stale network mount
                logger.debug(
                    "Cannot read volume usage, reporting zero capacity",
                    extra={"path": mount_path, "error": str(exc)},
                )

            volumes.append(
                Volume(
                    name=format_volume_name(mount_path, partition.device),
                    mount_path=mount_path,
                    total_bytes=total,
                    available_bytes=available,
                )
            )

        return volumes


class MountPointProbeDiscovery:
    """Probe a fixed list of well-known mount points.

    Capacity is unknown for probed entries and reported as zero.
    """

    def __init__(
        self,
        mount_points: Sequence[str] = POSIX_MOUNT_POINTS,
        *,
        exists: Callable[[str], bool] | None = None,
    ) -> None:
        self.mount_points: tuple[str, ...] = tuple(mount_points)
        self._exists: Callable[[str], bool] | None = exists

    def discover(self) -> list[Volume]:
        exists = self._exists or os.path.exists
        return [
            Volume(name=mount_point, mount_path=mount_point, total_bytes=0, available_bytes=0)
            for mount_point in self.mount_points
            if exists(mount_point)
        ]


class DriveLetterProbeDiscovery:
    """Probe Windows drive letters ``A:\\`` through ``Z:\\``."""

    def __init__(self, *, exists: Callable[[str], bool] | None = None) -> None:
        self._exists: Callable[[str], bool] | None = exists

    def discover(self) -> list[Volume]:
        exists = self._exists or os.path.exists
        volumes: list[Volume] = []
        for letter in WINDOWS_DRIVE_LETTERS:
            drive = f"{letter}:\\"
            if exists(drive):
                volumes.append(
                    Volume(
                        name=f"{letter}: Drive",
                        mount_path=drive,
                        total_bytes=0,
                        available_bytes=0,
                    )
                )
        return volumes


class MacVolumesDiscovery:
    """List the user's home directory and every entry under ``/Volumes``.

    The home directory comes first, labelled ``Home``, as a convenient
    starting point for browsing.
    """

    def __init__(
        self,
        volumes_dir: Path = MACOS_VOLUMES_DIR,
        home_dir: Path | None = None,
    ) -> None:
        self.volumes_dir: Path = volumes_dir
        self.home_dir: Path | None = home_dir

    def _home(self) -> Path | None:
        if self.home_dir is not None:
            return self.home_dir
        try:
            return Path.home()
        except RuntimeError:
            # Home directory cannot be determined
            return None

    def discover(self) -> list[Volume]:
        volumes: list[Volume] = []

        home = self._home()
        if home is not None:
            volumes.append(Volume(name="Home", mount_path=str(home), total_bytes=0, available_bytes=0))

        try:
            children = sorted(self.volumes_dir.iterdir())
        except OSError as exc:
            logger.debug(
                "Cannot read volumes directory",
                extra={"path": str(self.volumes_dir), "error": str(exc)},
            )
            return volumes

        for child in children:
            try:
                if not child.is_dir():
                    continue
            except OSError:
                continue
            volumes.append(Volume(name=child.name, mount_path=str(child), total_bytes=0, available_bytes=0))

        return volumes


class FallbackDiscovery:
    """Run a primary strategy and fall back when it fails or finds nothing."""

    def __init__(self, primary: VolumeDiscovery, fallback: VolumeDiscovery) -> None:
        self.primary: VolumeDiscovery = primary
        self.fallback: VolumeDiscovery = fallback

    def discover(self) -> list[Volume]:
        try:
            volumes = self.primary.discover()
        except Exception as exc:
            logger.warning(
                "Primary volume discovery failed, using fallback",
                extra={"strategy": type(self.primary).__name__, "error": str(exc)},
            )
            volumes = []

        if volumes:
            return volumes

        logger.debug(
            "Primary volume discovery found nothing, using fallback",
            extra={"strategy": type(self.fallback).__name__},
        )
        return self.fallback.discover()


def probe_discovery_for(platform: str) -> VolumeDiscovery:
    """Return the mount-point probing strategy for a platform.

    Args:
        platform: Value in the style of ``sys.platform``
    """
    if platform.startswith("win"):
        return DriveLetterProbeDiscovery()
    if platform == "darwin":
        return MacVolumesDiscovery()
    return MountPointProbeDiscovery()


def select_discovery(platform: str | None = None, *, all_partitions: bool = False) -> VolumeDiscovery:
    """Select the volume discovery strategy for the running platform.

    The OS partition table is preferred; the platform's probe strategy sits
    behind it as a fallback.

    Args:
        platform: Platform identifier (defaults to ``sys.platform``)
        all_partitions: Passed through to :class:`PartitionTableDiscovery`

    Returns:
        Strategy satisfying the VolumeDiscovery protocol
    """
    platform = platform or sys.platform
    return FallbackDiscovery(
        PartitionTableDiscovery(all_partitions=all_partitions),
        probe_discovery_for(platform),
    )


def list_volumes(
    discovery: VolumeDiscovery | None = None,
    *,
    all_partitions: bool = False,
) -> list[Volume]:
    """Enumerate the storage volumes visible to this process.

    Never raises. If no volumes can be discovered, or discovery fails
    outright, the result is an empty list.

    Args:
        discovery: Strategy to use instead of the platform default
        all_partitions: Include pseudo filesystems in partition-table discovery

    Returns:
        Discovered volumes, possibly empty
    """
    strategy = discovery or select_discovery(all_partitions=all_partitions)

    try:
        volumes = strategy.discover()
    except Exception as exc:
        logger.warning(
            "Volume discovery failed",
            extra={"strategy": type(strategy).__name__, "error": str(exc)},
        )
        return []

    logger.info("Volumes discovered", extra={"count": len(volumes)})
    return volumes
