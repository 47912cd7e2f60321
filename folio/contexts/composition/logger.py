"""
Composition context logger.

Provides logging interface for page composition with automatic [compose] prefix.
All composition modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compose]"


def setup_composition_logger(log_dir: Path, profile_path: Path) -> Path:
    """
    Setup logger for composition context.

    Args:
        log_dir: Directory for this build session
        profile_path: Profile data file being rendered

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="compose",
        log_dir=log_dir,
        extra_provenance={"Profile": profile_path},
    )


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compose] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_profile_loaded(source: Path, name: str) -> None:
    _log_debug(f"Loaded profile '{name}' from {source}")


def log_section_rendered(section: str, mode: str, size: int) -> None:
    _log_debug(f"  {section} ({mode}): {size} chars")


def log_page_written(path: Path, mode: str) -> None:
    _log_success(f"Wrote {mode} page: {path}")
