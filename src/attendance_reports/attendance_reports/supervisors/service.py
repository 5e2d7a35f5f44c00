from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.constants import ACTIVITY_HEADER, DATE_DISPLAY_FORMAT, RECENT_ACTIVITY_LIMIT, ROSTER_HEADER
from ..core.enums import ExportFormat
from ..core.exceptions import FetchError, ValidationError
from ..core.result import Failure, Result, Success
from ..employees.repository import EmployeeRepository
from ..exports.excel import render_sheet_xlsx
from ..exports.model import PDF_MIMETYPE, XLSX_MIMETYPE, ExportFile
from ..exports.pdf import render_table_pdf
from ..reports.activity import build_employee_name_map, join_activity
from .model import SupervisorProfile, SupervisorStats
from .repository import SupervisorRepository

logger = logging.getLogger(__name__)


class SupervisorProfileService:
    def __init__(
        self,
        supervisors: SupervisorRepository,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        recent_limit: int = RECENT_ACTIVITY_LIMIT,
        date_format: str = DATE_DISPLAY_FORMAT,
    ):
        self._supervisors = supervisors
        self._employees = employees
        self._attendance = attendance
        self._recent_limit = recent_limit
        self._date_format = date_format

    def load_profile(self, company_id: str, supervisor_id: str, *, email: Optional[str] = None) -> Result[SupervisorProfile]:
        """Roster, recent activity and counters for one supervisor."""

        try:
            full_name = self._supervisors.get_full_name(supervisor_id)
            employees = list(self._employees.list_for_company(company_id, supervisor_id=supervisor_id))
            recent = self._attendance.list_recent_marked_by(company_id, supervisor_id, limit=self._recent_limit)
        except (FetchError, ValidationError) as exc:
            return self._fetch_failed("profile", supervisor_id, exc)

        activities = join_activity(recent, build_employee_name_map(employees))
        stats = SupervisorStats(
            total_assigned=len(employees),
            active_employees=sum(1 for e in employees if e.is_active),
            recent_attendance=len(recent),
        )
        return Success(
            SupervisorProfile(
                supervisor_id=supervisor_id,
                full_name=full_name or "",
                email=email,
                stats=stats,
                employees=employees,
                activities=activities,
            )
        )

    def export_employees(self, company_id: str, supervisor_id: str) -> Result[ExportFile]:
        try:
            employees = self._employees.list_for_company(company_id, supervisor_id=supervisor_id)
        except (FetchError, ValidationError) as exc:
            return self._fetch_failed("employee export", supervisor_id, exc)

        body = [
            [
                e.full_name,
                e.phone or e.mobile or "",
                e.employment_type.value if e.employment_type else "",
                e.status.value,
                e.aadhar or "",
                e.pan or "",
            ]
            for e in employees
        ]
        return Success(
            ExportFile(
                filename="assigned_employees.xlsx",
                mimetype=XLSX_MIMETYPE,
                content=render_sheet_xlsx(ROSTER_HEADER, body, sheet_name="Employees"),
            )
        )

    def export_activity(
        self, company_id: str, supervisor_id: str, *, fmt: ExportFormat = ExportFormat.PDF
    ) -> Result[ExportFile]:
        try:
            employees = self._employees.list_for_company(company_id, supervisor_id=supervisor_id)
            recent = self._attendance.list_recent_marked_by(company_id, supervisor_id, limit=self._recent_limit)
        except (FetchError, ValidationError) as exc:
            return self._fetch_failed("activity export", supervisor_id, exc)

        activities = join_activity(recent, build_employee_name_map(employees))
        body = [[a.date.strftime(self._date_format), a.employee_name, a.status] for a in activities]

        if fmt is ExportFormat.XLSX:
            content = render_sheet_xlsx(ACTIVITY_HEADER, body, sheet_name="Attendance")
            return Success(ExportFile("attendance_history.xlsx", XLSX_MIMETYPE, content))

        content = render_table_pdf("Attendance History", ACTIVITY_HEADER, body)
        return Success(ExportFile("attendance_history.pdf", PDF_MIMETYPE, content))

    def _fetch_failed(self, what: str, supervisor_id: str, exc: Exception) -> Failure:
        logger.warning("Fetch for supervisor %s failed (supervisor=%s): %s", what, supervisor_id, exc)
        return Failure(reason=f"Could not load the {what}. Please try again.", error=exc)
