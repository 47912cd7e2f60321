"""
PDF inspection helpers for exported pages.

Helper functions:
    page_count: Quick page count without full extraction.
    page_size: Media box dimensions (points) of one page.
    is_a4: Whether a page size matches ISO A4 within a tolerance.
"""

from pathlib import Path
from typing import Optional, Tuple

from PyPDF2 import PdfReader

# ISO A4 in PostScript points (1/72 inch)
A4_POINTS = (595.28, 841.89)


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except Exception:
        return None


def page_size(pdf_path: Path, page_index: int = 0) -> Tuple[float, float]:
    """
    Return (width, height) in points of a page's media box.

    Raises:
        IndexError: If the PDF has fewer pages than page_index + 1
    """
    reader = PdfReader(str(pdf_path))
    box = reader.pages[page_index].mediabox
    return float(box.width), float(box.height)


def is_a4(size: Tuple[float, float], tolerance: float = 1.5) -> bool:
    """Check portrait A4 dimensions, allowing for rounding in the producer."""
    width, height = size
    return abs(width - A4_POINTS[0]) <= tolerance and abs(height - A4_POINTS[1]) <= tolerance
