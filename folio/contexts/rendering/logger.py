"""
Rendering context logger.

Provides logging interface for PDF export with automatic [export] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger
from folio.utils.timestamp import format_elapsed

CONTEXT_PREFIX = "[export]"


def setup_rendering_logger(log_dir: Path, console_level: str = "WARNING") -> Path:
    """
    Setup logger for the export utility.

    The console only shows warnings and errors by default so that stdout carries
    nothing but the CLI's confirmation line; everything goes to the log file.

    Args:
        log_dir: Directory for this export session
        console_level: Minimum level echoed to stdout

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="export",
        log_dir=log_dir,
        extra_provenance={"Browser": "chromium (playwright)"},
        console_level=console_level,
    )


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [export] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_export_start(job) -> None:
    """Log start of an export with its settings."""
    _log_info(f"Exporting {job.source_path} -> {job.output_path}")
    _log_debug(f"  URL: {job.source_url}")
    _log_debug(f"  Format: {job.page_format}, margins: {job.margins}")
    _log_debug(f"  Background: {job.print_background}, wait until: {job.wait_until}")


def log_export_step(step: str) -> None:
    _log_debug(f"  {step}")


def log_export_result(result) -> None:
    """Log a finished export (ExportResult)."""
    _log_success(f"PDF written: {result.pdf_path} ({format_elapsed(result.elapsed)})")
    _log_debug(f"  Pages: {result.page_count}, size: {result.pdf_path.stat().st_size} bytes")
