"""
FOLIO - Animated single-page résumé site with headless PDF export

Renders a personal portfolio page whose sections reveal themselves as they
scroll into view, and exports a print snapshot of that page to PDF.

Architecture:
- Animation Context: Viewport visibility latches and time-based transitions
- Composition Context: Profile data and section templates assembled into a page
- Rendering Context: Headless browser export of the composed page to PDF
"""

__version__ = "0.1.0"
