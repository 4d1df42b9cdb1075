"""Filesystem scanning: volume discovery, directory listing and sizing."""

from space_scanner.core.filesystem.lister import list_directory
from space_scanner.core.filesystem.size_aggregator import (
    HIDDEN_PREFIX,
    MAX_AGGREGATION_DEPTH,
    aggregate_size,
    is_hidden,
)
from space_scanner.core.filesystem.sort_policy import sort_entries, sort_key
from space_scanner.core.filesystem.volumes import (
    DriveLetterProbeDiscovery,
    FallbackDiscovery,
    MacVolumesDiscovery,
    MountPointProbeDiscovery,
    PartitionTableDiscovery,
    list_volumes,
    select_discovery,
)

__all__ = [
    "HIDDEN_PREFIX",
    "MAX_AGGREGATION_DEPTH",
    "DriveLetterProbeDiscovery",
    "FallbackDiscovery",
    "MacVolumesDiscovery",
    "MountPointProbeDiscovery",
    "PartitionTableDiscovery",
    "aggregate_size",
    "is_hidden",
    "list_directory",
    "list_volumes",
    "select_discovery",
    "sort_entries",
    "sort_key",
]
