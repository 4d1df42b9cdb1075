"""Logging infrastructure with optional syslog integration and scan ID tracking.

Every record emitted while a scan ID is set carries it, so all log lines of
one command-line invocation can be grouped together. Console output goes to
stderr so that stdout stays reserved for results (tables or JSON).
"""

import contextvars
import logging
import logging.handlers
import sys
import uuid
from typing import Final, override

# Scan ID context variable for grouping the log records of one invocation
scan_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "scan_id",
    default=None,
)

# Log format constants
DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(scan_id)s] - %(message)s"

SYSLOG_LOG_FORMAT: Final[str] = "space-scanner[%(process)d]: %(levelname)s - [%(scan_id)s] - %(name)s - %(message)s"

DEFAULT_SYSLOG_ADDRESS: Final[str] = "/dev/log"


class ScanIDFilter(logging.Filter):
    """Logging filter that adds the current scan ID to log records."""

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        scan_id = scan_id_var.get()
        record.scan_id = scan_id if scan_id is not None else "N/A"
        return True


def configure_logging(
    *,
    log_level: str = "WARNING",
    enable_syslog: bool = False,
    syslog_address: str = DEFAULT_SYSLOG_ADDRESS,
    enable_console: bool = True,
) -> None:
    """Configure application logging.

    Sets up logging infrastructure with:
    - Scan ID tracking via ContextVar
    - Optional syslog integration
    - Console output on stderr

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_syslog: Enable syslog handler
        syslog_address: Syslog socket address
        enable_console: Enable console output handler
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    scan_id_filter = ScanIDFilter()

    if enable_syslog:
        try:
            syslog_handler = logging.handlers.SysLogHandler(
                address=syslog_address,
                facility=logging.handlers.SysLogHandler.LOG_USER,
            )
            syslog_handler.setFormatter(logging.Formatter(SYSLOG_LOG_FORMAT))
            syslog_handler.addFilter(scan_id_filter)
            root_logger.addHandler(syslog_handler)

        except OSError as exc:
            # Syslog not available (e.g., containers, macOS without /dev/log)
            print(
                f"Warning: Could not connect to syslog at {syslog_address}: {exc}",
                file=sys.stderr,
            )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
        console_handler.addFilter(scan_id_filter)
        root_logger.addHandler(console_handler)


def new_scan_id() -> str:
    """Generate a short random scan identifier."""
    return uuid.uuid4().hex[:12]


def set_scan_id(scan_id: str) -> None:
    """Set the scan ID for the current context.

    Args:
        scan_id: Identifier attached to all subsequent log records in this context
    """
    _ = scan_id_var.set(scan_id)


def get_scan_id() -> str | None:
    """Get the current scan ID from context, or None if not set."""
    return scan_id_var.get()


def clear_scan_id() -> None:
    """Clear the scan ID from the current context."""
    _ = scan_id_var.set(None)
