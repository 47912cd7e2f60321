"""
Headless PDF export of a composed page.

One job, one attempt: launch Chromium, open the page by file URI, wait for network
quiescence, print to an A4 PDF with zero margins and backgrounds, close the browser.
Failures at any step propagate to the caller unchanged; there is no retry and no
cleanup of partial output.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from playwright.sync_api import sync_playwright

from folio.contexts.rendering.logger import (
    log_export_result,
    log_export_start,
    log_export_step,
)
from folio.utils.pdf_processing import page_count

PAGE_FORMAT = "A4"
WAIT_UNTIL = "networkidle"
LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


def zero_margins() -> Dict[str, str]:
    return {"top": "0", "right": "0", "bottom": "0", "left": "0"}


@dataclass(frozen=True)
class ExportJob:
    """
    A single page-to-PDF export.

    Attributes:
        source_path: Composed, self-contained HTML document
        output_path: PDF file to create or overwrite
        page_format: Paper size name understood by the browser
        margins: Page margins (all zero: the page carries its own spacing)
        print_background: Include background colors and images
        wait_until: Load state that counts as "page ready"
    """

    source_path: Path
    output_path: Path
    page_format: str = PAGE_FORMAT
    margins: Dict[str, str] = field(default_factory=zero_margins)
    print_background: bool = True
    wait_until: str = WAIT_UNTIL

    @property
    def source_url(self) -> str:
        return Path(self.source_path).resolve().as_uri()


@dataclass
class ExportResult:
    """
    Result of a finished export.

    Attributes:
        pdf_path: Written PDF
        page_count: Pages in the PDF (None if unreadable)
        elapsed: Wall-clock seconds for the whole run
    """

    pdf_path: Path
    page_count: Optional[int] = None
    elapsed: float = 0.0


def export_pdf(job: ExportJob) -> ExportResult:
    """
    Run an export job.

    Raises:
        FileNotFoundError: If the source document does not exist (before launch)
        playwright.sync_api.Error: On browser launch, navigation or PDF failures
    """
    source = Path(job.source_path)
    if not source.is_file():
        raise FileNotFoundError(f"Source document not found: {source}")

    log_export_start(job)
    start_time = time.time()

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True, args=LAUNCH_ARGS)
        log_export_step("Browser launched")

        page = browser.new_page()
        page.goto(job.source_url, wait_until=job.wait_until)
        log_export_step(f"Page loaded ({job.wait_until})")

        page.pdf(
            path=str(job.output_path),
            format=job.page_format,
            print_background=job.print_background,
            margin=job.margins,
        )
        log_export_step("PDF rendered")

        browser.close()

    output = Path(job.output_path)
    result = ExportResult(
        pdf_path=output,
        page_count=page_count(output),
        elapsed=time.time() - start_time,
    )
    log_export_result(result)
    return result
