"""Ordering of directory listings.

Directories come first, then files; each group is ordered by size, largest
first. Entries of equal size keep the relative order in which the directory
enumeration produced them.
"""

from collections.abc import Iterable

from space_scanner.types.models import DirectoryEntry


def sort_key(entry: DirectoryEntry) -> tuple[bool, int]:
    """Return the sort key placing directories first, then larger sizes first."""
    return (not entry.is_directory, -entry.size_bytes)


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Order entries for display.

    Args:
        entries: Entries in enumeration order

    Returns:
        New list with every directory before every file and non-increasing
        size within each group. Ties keep enumeration order.

    Examples:
        >>> small = DirectoryEntry("a", "/r/a", False, 1)
        >>> big = DirectoryEntry("b", "/r/b", False, 9)
        >>> folder = DirectoryEntry("c", "/r/c", True, 0)
        >>> [e.name for e in sort_entries([small, big, folder])]
        ['c', 'b', 'a']
    """
    return sorted(entries, key=sort_key)
