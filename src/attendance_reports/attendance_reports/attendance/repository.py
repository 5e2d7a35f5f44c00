from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceWithName


class AttendanceRepository(Protocol):
    def list_for_company(
        self,
        company_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Attendance of a company, optionally within an inclusive date window."""

        raise NotImplementedError

    def list_recent_marked_by(self, company_id: str, supervisor_id: str, *, limit: int) -> Sequence[AttendanceWithName]:
        """Most recent first, at most ``limit`` rows."""

        raise NotImplementedError
