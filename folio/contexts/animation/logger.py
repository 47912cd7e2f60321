"""
Animation context logger.

Provides logging interface for the animation engine with automatic [animate] prefix.
All animation modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[animate]"


def setup_animation_logger(log_dir: Path) -> Path:
    """Setup logger for animation simulations."""
    return _setup_logger(context_name="animate", log_dir=log_dir)


def _log_info(message: str) -> None:
    """Log info message with [animate] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [animate] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_latched(name: str, fraction: float) -> None:
    _log_debug(f"{name} entered viewport ({fraction:.0%} visible)")


def log_completed(kind: str, name: str, at_ms: float) -> None:
    _log_debug(f"{kind} {name} reached terminal state at {at_ms:.0f}ms")


def log_disposed(kind: str, name: str, pending: int) -> None:
    if pending:
        _log_debug(f"{kind} {name} disposed, cancelled {pending} pending callbacks")
