"""Report renderer: writes endpoint records to a colour-coded .docx file."""

import logging
import os
import stat
import tempfile
from pathlib import Path

from docx import Document
from docx.shared import Length, RGBColor

from api_doc_report.errors import OutputWriteError
from api_doc_report.parser.base import EndpointRecord
from api_doc_report.report import styles

logger = logging.getLogger(__name__)

TITLE = "API Documentation"
INTRO = "This document provides details of the API endpoints, including methods, parameters, and responses."


class ReportRenderer:
    """Renders EndpointRecords into a Word document, one section per endpoint."""

    def __init__(self, api_title: str | None = None):
        self.api_title = api_title

    def render(self, records: list[EndpointRecord], output_path: Path) -> None:
        """Build the document and write it to ``output_path``, replacing any existing file."""
        doc = self.build(records)
        self._save(doc, output_path)
        logger.debug("Wrote %d endpoint sections to %s", len(records), output_path)

    def build(self, records: list[EndpointRecord]):
        """Build the in-memory document for the given records."""
        doc = Document()
        doc.core_properties.title = TITLE
        if self.api_title:
            doc.core_properties.subject = self.api_title

        self._add_line(doc, TITLE, styles.ACCENT, bold=True, size=styles.TITLE_SIZE)
        self._add_line(doc, INTRO, styles.MUTED)

        for record in records:
            self._add_endpoint(doc, record)

        return doc

    def _add_endpoint(self, doc, record: EndpointRecord) -> None:
        self._add_line(
            doc,
            f"{record.method} {record.path}",
            styles.method_color(record.method),
            bold=True,
            size=styles.HEADING_SIZE,
        )
        self._add_line(doc, f"Description: {record.description}", styles.TEXT)
        self._add_line(doc, "Parameters:", styles.ACCENT, bold=True)

        for param in record.parameters or ("None",):
            self._add_line(doc, f"  - {param}", styles.TEXT)

        self._add_line(doc, f"Response: {record.response}", styles.RESPONSE)
        doc.add_paragraph()

    def _add_line(self, doc, text: str, color: RGBColor, bold: bool = False, size: Length | None = None) -> None:
        """Add a paragraph holding a single styled run."""
        run = doc.add_paragraph().add_run(text)
        run.font.color.rgb = color
        if bold:
            run.bold = True
        if size is not None:
            run.font.size = size

    def _save(self, doc, output_path: Path) -> None:
        """Save via a temp file in the target directory so a failed write leaves no partial report."""
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(suffix=".docx", prefix=".report-", dir=output_path.parent)
            with os.fdopen(fd, "wb") as fh:
                doc.save(fh)
            os.chmod(tmp_path, _target_mode(output_path))
            os.replace(tmp_path, output_path)
            tmp_path = None
        except OSError as exc:
            raise OutputWriteError(f"Cannot write report to {output_path}: {exc}") from exc
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)


def _target_mode(output_path: Path) -> int:
    """Keep the mode of the file being replaced, else the umask default for a new file."""
    try:
        return stat.S_IMODE(os.stat(output_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
