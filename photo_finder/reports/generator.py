"""Render a match set into a PDF on disk."""

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from ..errors import NoMatchesError, ReportGenerationError
from ..models.report import ReportArtifact
from ..models.search import SearchCriteria

logger = logging.getLogger(__name__)


class ReportGenerator:
    def __init__(
        self,
        report_dir: Optional[Path] = None,
        title: str = "Photo Search Report",
    ):
        self.report_dir = Path(report_dir) if report_dir else None
        self.title = title

    async def generate(self, match_set: list[str], criteria: SearchCriteria) -> ReportArtifact:
        """Write the report and return it once the bytes are on disk.

        Returning is the completion signal: the file has been flushed and
        fsynced. On failure the partial file is removed and
        ReportGenerationError is raised. If the caller is cancelled
        mid-write, the finished file is removed before the cancellation
        propagates.
        """
        if not match_set:
            raise NoMatchesError()

        lines = [self.title, f"Search: {criteria.describe()}"]
        lines.extend(match_set)
        write = asyncio.ensure_future(asyncio.to_thread(self._write, lines))
        try:
            path = await asyncio.shield(write)
        except asyncio.CancelledError:
            # The worker thread cannot be stopped; wait for it and remove its file
            await asyncio.wait([write])
            if not write.cancelled() and write.exception() is None:
                orphan = write.result()
                orphan.unlink(missing_ok=True)
                logger.info(f"Report generation cancelled, removed {orphan}")
            raise
        logger.info(f"Report with {len(match_set)} photos written to {path}")
        return ReportArtifact(path=path, page_content=lines)

    def _write(self, lines: list[str]) -> Path:
        try:
            fd, name = tempfile.mkstemp(
                prefix="photo-report-", suffix=".pdf", dir=self.report_dir,
            )
        except OSError as e:
            raise ReportGenerationError(details=f"Cannot create report file: {e}") from e

        path = Path(name)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(self._render(lines))
                f.flush()
                os.fsync(f.fileno())
        except Exception as e:
            path.unlink(missing_ok=True)
            raise ReportGenerationError(details=str(e)) from e
        return path

    def _render(self, lines: list[str]) -> bytes:
        title, *body = lines
        pdf = FPDF()
        pdf.set_auto_page_break(auto=True, margin=15)
        pdf.set_margins(15, 15, 15)
        pdf.add_page()

        pdf.set_font("Helvetica", style="B", size=16)
        pdf.multi_cell(0, 10, _latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", size=11)
        for line in body:
            pdf.multi_cell(0, 7, _latin1(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        return bytes(pdf.output())


def _latin1(text: str) -> str:
    # Core PDF fonts only cover latin-1
    return text.encode("latin-1", errors="replace").decode("latin-1")
