"""
Shared utilities for FOLIO.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log directories
- PDF inspection
"""

from folio.utils.timestamp import format_elapsed, now

__all__ = ["format_elapsed", "now"]
