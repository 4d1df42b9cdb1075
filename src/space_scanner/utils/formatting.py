"""Pure formatting utilities for human-readable output.

This module provides stateless functions converting scan results into
strings for terminal display. All functions are pure with no side effects.
"""

import os
from collections.abc import Sequence

from space_scanner.types.models import DirectoryEntry, Volume

# Binary unit ladder (1024-based), largest first
_UNITS: tuple[tuple[str, int], ...] = (
    ("TB", 1024**4),
    ("GB", 1024**3),
    ("MB", 1024**2),
    ("KB", 1024),
)


def format_size(size_bytes: int, *, precision: int = 1) -> str:
    """Convert bytes to human-readable size format.

    Uses binary units (1024-based) for consistency with system tools.

    Args:
        size_bytes: Number of bytes to format (must be non-negative)
        precision: Decimal places shown for KB and larger units

    Returns:
        Human-readable string such as ``"512 Bytes"`` or ``"1.5 MB"``

    Examples:
        >>> format_size(512)
        '512 Bytes'
        >>> format_size(2048)
        '2.0 KB'
        >>> format_size(1572864)
        '1.5 MB'
        >>> format_size(2748779069440)
        '2.5 TB'
    """
    if size_bytes < 0:
        msg = "size_bytes must be non-negative"
        raise ValueError(msg)

    for unit, factor in _UNITS:
        if size_bytes >= factor:
            return f"{size_bytes / factor:.{precision}f} {unit}"

    return f"{size_bytes} Bytes"


def printable_name(name: str) -> str:
    """Replace undecodable filename bytes with U+FFFD for terminal display.

    ``os.scandir`` carries bytes that are not valid in the filesystem
    encoding as lone surrogates, which a strict UTF-8 stream cannot write.

    Examples:
        >>> printable_name(os.fsdecode(b"bad\\xff.txt")) == "bad\\ufffd.txt"
        True
    """
    return os.fsencode(name).decode(errors="replace")


def format_usage_percent(total_bytes: int, available_bytes: int) -> str:
    """Format the used share of a volume, or ``"-"`` when capacity is unknown.

    Examples:
        >>> format_usage_percent(1000, 250)
        '75.0%'
        >>> format_usage_percent(0, 0)
        '-'
    """
    if total_bytes <= 0:
        return "-"
    used = max(total_bytes - available_bytes, 0)
    return f"{used / total_bytes * 100:.1f}%"


def render_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    right_align: frozenset[int] = frozenset(),
) -> str:
    """Render rows as a plain-text table with a header underline.

    Args:
        headers: Column titles
        rows: Cell strings, one sequence per row
        right_align: Indices of columns to right-align (numeric columns)

    Returns:
        Table text without a trailing newline
    """
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def fmt(cells: Sequence[str]) -> str:
        parts = [
            cell.rjust(widths[i]) if i in right_align else cell.ljust(widths[i])
            for i, cell in enumerate(cells)
        ]
        return "  ".join(parts).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def render_entries(entries: Sequence[DirectoryEntry], *, human_readable: bool = True) -> str:
    """Render a directory listing as a table of type, size and name."""
    rows = [
        (
            "dir" if entry.is_directory else "file",
            format_size(entry.size_bytes) if human_readable else str(entry.size_bytes),
            printable_name(entry.name) + ("/" if entry.is_directory else ""),
        )
        for entry in entries
    ]
    return render_table(("TYPE", "SIZE", "NAME"), rows, right_align=frozenset({1}))


def render_volumes(volumes: Sequence[Volume], *, human_readable: bool = True) -> str:
    """Render volumes as a table of name, mount path, capacity and usage."""

    def size(value: int) -> str:
        if value == 0:
            return "-"
        return format_size(value) if human_readable else str(value)

    rows = [
        (
            printable_name(volume.name),
            printable_name(volume.mount_path),
            size(volume.total_bytes),
            size(volume.available_bytes),
            format_usage_percent(volume.total_bytes, volume.available_bytes),
        )
        for volume in volumes
    ]
    return render_table(
        ("NAME", "MOUNT", "TOTAL", "AVAILABLE", "USED"),
        rows,
        right_align=frozenset({2, 3, 4}),
    )
