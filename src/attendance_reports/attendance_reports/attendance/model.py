from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.validators import optional_text, require_date, require_non_empty
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's status on one calendar date.

    ``status`` keeps the stored code as-is. Only ``P`` counts as present; any
    other code (``A``, leave codes, blanks) is treated as not present.
    """

    attendance_id: str
    employee_id: str
    date: date
    status: str
    company_id: Optional[str] = None
    marked_by_owner: Optional[str] = None
    marked_by_supervisor: Optional[str] = None

    @property
    def marked_by(self) -> Optional[str]:
        return self.marked_by_owner or self.marked_by_supervisor

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    @property
    def status_code(self) -> str:
        return getattr(self.status, "value", self.status)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            attendance_id=require_non_empty(row.get("attendance_id"), "attendance_id"),
            employee_id=require_non_empty(row.get("employee_id"), "employee_id"),
            date=require_date(row.get("date"), "date"),
            status=optional_text(row.get("status")) or "",
            company_id=optional_text(row.get("company_id")),
            marked_by_owner=optional_text(row.get("marked_by_owner")),
            marked_by_supervisor=optional_text(row.get("marked_by_supervisor")),
        )


@dataclass(frozen=True)
class AttendanceWithName:
    """Read-model for the activity feed: attendance joined to the employee name."""

    attendance_id: str
    date: date
    status: str
    employee_id: Optional[str] = None
    employee_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AttendanceWithName":
        return cls(
            attendance_id=require_non_empty(row.get("attendance_id"), "attendance_id"),
            date=require_date(row.get("date"), "date"),
            status=optional_text(row.get("status")) or "",
            employee_id=optional_text(row.get("employee_id")),
            employee_name=optional_text(row.get("full_name")),
        )


@dataclass(frozen=True)
class ActivityRecord:
    """Recent-attendance row as shown in the UI and the history export."""

    id: str
    date: date
    employee_name: str
    status: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.strftime("%Y-%m-%d"),
            "employee_name": self.employee_name,
            "status": self.status,
        }
