"""Protocol definitions for component interfaces.

This module defines structural subtyping protocols that establish
contracts for pluggable scanning strategies without requiring inheritance.
"""

from typing import Protocol, runtime_checkable

from space_scanner.types.models import Volume


@runtime_checkable
class VolumeDiscovery(Protocol):
    """Protocol for platform-specific volume discovery strategies.

    Implementations may raise on platform failures; the enumerator that
    drives them converts any failure into an empty result so callers never
    see which strategy ran or whether it failed.
    """

    def discover(self) -> list[Volume]:
        """Discover the volumes currently visible to this process.

        Returns:
            Volumes in the order the strategy found them
        """
        ...
