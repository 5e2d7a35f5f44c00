from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import ActivityRecord, AttendanceWithName
from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import AttendanceStatus
from ..employees.model import Employee


def build_employee_name_map(employees: Iterable[Employee]) -> dict[str, str]:
    return {e.employee_id: e.full_name for e in employees}


def status_label(status) -> str:
    """``P`` is "Present"; every other code reads as "Absent"."""
    return "Present" if status == AttendanceStatus.PRESENT else "Absent"


def join_activity(
    rows: Sequence[AttendanceWithName],
    names: Optional[Mapping[str, str]] = None,
) -> list[ActivityRecord]:
    """Map attendance rows to activity records, keeping input order.

    The name comes from the row's own join first, then ``names`` by employee
    id, and falls back to "Unknown".
    """

    names = names or {}
    out: list[ActivityRecord] = []
    for r in rows:
        name = r.employee_name or (names.get(r.employee_id) if r.employee_id else None)
        out.append(
            ActivityRecord(
                id=r.attendance_id,
                date=r.date,
                employee_name=name or UNKNOWN_EMPLOYEE_NAME,
                status=status_label(r.status),
            )
        )
    return out
