"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Current local time as a sortable, filename-safe string (YYYYMMDD_HHMMSS)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_elapsed(seconds: float) -> str:
    """
    Format a duration in seconds for log output.

    Examples:
        format_elapsed(0.4213)  # "421ms"
        format_elapsed(3.5)     # "3.50s"
    """
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.2f}s"
