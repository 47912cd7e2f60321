#!/usr/bin/env python3
"""
PDF Export CLI

Exports the print snapshot of the portfolio page to PDF with headless Chromium.

Takes no arguments: reads the fixed document {FOLIO_SITE_PATH}/cv.html and writes
the fixed file {FOLIO_PDF_NAME} in the working directory. Any failure during launch,
navigation or export is left uncaught, so the process exits non-zero with a traceback.

Examples:\n

    export_pdf.py
"""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv

from folio.contexts.rendering import ExportJob, export_pdf
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.utils.timestamp import now

load_dotenv()
SITE_PATH = Path(os.getenv("FOLIO_SITE_PATH", "site"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
PDF_NAME = os.getenv("FOLIO_PDF_NAME", "CV_Gajanraj_Mohanaraj.pdf")
SOURCE_DOCUMENT = "cv.html"

app = typer.Typer(
    help="Export the composed portfolio page to an A4 PDF",
    add_completion=False,
    pretty_exceptions_enable=False,
)


@app.command()
def main():
    """Export {FOLIO_SITE_PATH}/cv.html to {FOLIO_PDF_NAME}."""
    setup_rendering_logger(LOGS_PATH / f"export_{now()}")

    job = ExportJob(
        source_path=SITE_PATH / SOURCE_DOCUMENT,
        output_path=Path.cwd() / PDF_NAME,
    )
    export_pdf(job)

    typer.echo(f"✓ PDF generated: {PDF_NAME}")


if __name__ == "__main__":
    app()
