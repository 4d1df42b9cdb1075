"""Type definitions and protocols for space-scanner.

This package provides:
- Data models (immutable dataclasses)
- Protocol definitions (structural subtyping interfaces)
- Type aliases (PEP 695 modern syntax)
"""

from space_scanner.types.aliases import (
    EntryPayload,
    ErrorPayload,
    VolumePayload,
)
from space_scanner.types.models import (
    DirectoryEntry,
    Volume,
)
from space_scanner.types.protocols import VolumeDiscovery

__all__ = [
    # Type aliases
    "EntryPayload",
    "ErrorPayload",
    "VolumePayload",
    # Data models
    "DirectoryEntry",
    "Volume",
    # Protocols
    "VolumeDiscovery",
]
