from __future__ import annotations

from dataclasses import dataclass

PDF_MIMETYPE = "application/pdf"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
CSV_MIMETYPE = "text/csv"


@dataclass(frozen=True)
class ExportFile:
    """A rendered document ready to be sent as a download."""

    filename: str
    mimetype: str
    content: bytes
