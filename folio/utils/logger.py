"""
Session logging shared by the FOLIO contexts.

Every CLI run gets its own log directory holding one DEBUG log file; the console
only echoes what the CLI's stdout contract allows (the export CLI keeps it to
warnings so that its single confirmation line stays alone on stdout).
Context wrappers with message prefixes live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

import folio

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, Any]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Replace all loguru sinks with a session file sink and a console sink.

    Args:
        context_name: Log file stem ("animate", "compose" or "export")
        log_dir: Directory for this session, created if missing
        extra_provenance: Additional key-value pairs for the session header
        console_level: Minimum level echoed to stdout; the file always gets DEBUG

    Returns:
        Path to the log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, Any]] = None) -> None:
    """Write the session header: command line, working directory, versions."""
    logger.debug("-" * 60)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}, folio: {folio.__version__}")
    for key, value in (extra_context or {}).items():
        logger.debug(f"{key}: {value}")
    logger.debug("-" * 60)
