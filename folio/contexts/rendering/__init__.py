"""
Rendering Context

Responsibilities:
- Exports a composed page to PDF through a headless browser
- Reports the written file and its page count

Owns: Browser lifecycle for one export, PDF output
Never: Modifies page content
"""

from folio.contexts.rendering.exporter import ExportJob, ExportResult, export_pdf

__all__ = ["ExportJob", "ExportResult", "export_pdf"]
