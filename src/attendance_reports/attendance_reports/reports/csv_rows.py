from __future__ import annotations

import csv
import io
import logging
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import CSV_HEADER, UNKNOWN_EMPLOYEE_NAME
from ..core.enums import OrphanPolicy
from ..employees.model import Employee

logger = logging.getLogger(__name__)


def _format_line(values: Sequence[object]) -> str:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="")
    writer.writerow(["" if v is None else v for v in values])
    return out.getvalue()


def build_csv_rows(
    employees: Sequence[Employee],
    attendance: Iterable[AttendanceRecord],
    *,
    on_orphan: OrphanPolicy = OrphanPolicy.DROP,
) -> list[str]:
    """One CSV line per attendance row, in attendance order (header excluded).

    Columns follow ``CSV_HEADER``. Rows whose employee is not in ``employees``
    are dropped unless ``on_orphan`` asks for an "Unknown" line.
    """

    by_id = {e.employee_id: e for e in employees}
    lines: list[str] = []
    dropped = 0

    for a in attendance:
        emp = by_id.get(a.employee_id)
        if emp is None:
            if on_orphan is not OrphanPolicy.REPORT_UNKNOWN:
                dropped += 1
                continue
            name, contact = UNKNOWN_EMPLOYEE_NAME, None
        else:
            name, contact = emp.full_name, emp.contact

        lines.append(
            _format_line(
                [
                    name,
                    a.employee_id,
                    contact,
                    a.status_code,
                    a.date.strftime("%Y-%m-%d"),
                    a.marked_by,
                    a.company_id,
                ]
            )
        )

    if dropped:
        logger.warning("CSV export dropped %d attendance row(s) with no matching employee", dropped)
    return lines


def build_csv_document(lines: Iterable[str]) -> str:
    return "\n".join([_format_line(CSV_HEADER), *lines])
