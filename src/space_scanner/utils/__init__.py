"""Shared utility modules for common operations.

This package provides:
- Data size and table formatting for terminal output
- Logging configuration with scan ID tracking
"""

from space_scanner.utils.formatting import (
    format_size,
    format_usage_percent,
    printable_name,
    render_entries,
    render_table,
    render_volumes,
)

__all__ = [
    "format_size",
    "format_usage_percent",
    "printable_name",
    "render_entries",
    "render_table",
    "render_volumes",
]
