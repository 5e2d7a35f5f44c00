from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.model import ActivityRecord, AttendanceWithName
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds
from ..core.constants import MONTHLY_ATTENDANCE_HEADER, WAGE_SUMMARY_HEADER
from ..core.enums import ExportFormat, OrphanPolicy
from ..core.exceptions import FetchError, ValidationError
from ..core.result import Failure, Result, Success
from ..employees.repository import EmployeeRepository
from ..exports.excel import render_sheet_xlsx
from ..exports.model import CSV_MIMETYPE, PDF_MIMETYPE, XLSX_MIMETYPE, ExportFile
from ..exports.pdf import render_table_pdf
from ..payroll.aggregator import aggregate
from ..payroll.calculator.base import WageCalculator
from ..payroll.model import WageSummaryRow
from .activity import build_employee_name_map, join_activity
from .csv_rows import build_csv_document, build_csv_rows

logger = logging.getLogger(__name__)


def format_amount(value: Decimal) -> str:
    return f"{value.quantize(Decimal('0.01')):f}"


class ReportsService:
    """Owner reports: wage summary, monthly attendance, bulk CSV, history.

    Every call fetches fresh data; a fetch failure short-circuits into a
    ``Failure`` and nothing is aggregated.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[WageCalculator] = None,
        on_orphan: OrphanPolicy = OrphanPolicy.DROP,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator
        self._on_orphan = on_orphan

    def summarize_month(self, company_id: str, *, month: date) -> Result[list[WageSummaryRow]]:
        period = month_bounds(month)
        try:
            employees = self._employees.list_for_company(company_id)
            attendance = self._attendance.list_for_company(
                company_id, start_date=period.start, end_date=period.end
            )
        except (FetchError, ValidationError) as exc:
            return self._fetch_failed("wage summary", company_id, exc)

        rows = aggregate(
            employees,
            attendance,
            period=period,
            calculator=self._calculator,
            on_orphan=self._on_orphan,
        )
        return Success(rows)

    def wage_summary(self, company_id: str, *, today: date, fmt: ExportFormat = ExportFormat.PDF) -> Result[ExportFile]:
        result = self.summarize_month(company_id, month=today)
        if not result.ok:
            return result

        title = f"Wage Summary Report - {today.strftime('%B %Y')}"
        stem = f"wage-summary-{today.strftime('%Y-%m')}"
        if fmt is ExportFormat.XLSX:
            body = [[r.employee_name, r.employee_id, r.present_days, r.wage.quantize(Decimal('0.01'))] for r in result.value]
            return Success(self._xlsx(stem, body, header=WAGE_SUMMARY_HEADER, sheet_name="Wage Summary"))

        body = [[r.employee_name, r.employee_id, r.present_days, format_amount(r.wage)] for r in result.value]
        return Success(self._pdf(stem, title, body, header=WAGE_SUMMARY_HEADER))

    def monthly_attendance(self, company_id: str, *, month: date) -> Result[ExportFile]:
        result = self.summarize_month(company_id, month=month)
        if not result.ok:
            return result

        title = f"Monthly Attendance Report - {month.strftime('%B %Y')}"
        body = [[r.employee_name, r.employee_id, r.present_days, r.absent_days] for r in result.value]
        stem = f"monthly-attendance-{month.strftime('%Y-%m')}"
        return Success(self._pdf(stem, title, body, header=MONTHLY_ATTENDANCE_HEADER))

    def export_all_data(self, company_id: str, *, today: date) -> Result[ExportFile]:
        try:
            employees = self._employees.list_for_company(company_id)
            attendance = self._attendance.list_for_company(company_id)
        except (FetchError, ValidationError) as exc:
            return self._fetch_failed("data export", company_id, exc)

        lines = build_csv_rows(employees, attendance, on_orphan=self._on_orphan)
        logger.info("Exporting %d attendance row(s) for company %s", len(lines), company_id)
        return Success(
            ExportFile(
                filename=f"all-data-{today.strftime('%Y-%m-%d')}.csv",
                mimetype=CSV_MIMETYPE,
                content=build_csv_document(lines).encode("utf-8-sig"),
            )
        )

    def employee_history(self, company_id: str, employee_id: str) -> Result[list[ActivityRecord]]:
        try:
            employees = self._employees.list_for_company(company_id)
            attendance = self._attendance.list_for_company(company_id, employee_id=employee_id)
        except (FetchError, ValidationError) as exc:
            return self._fetch_failed("attendance history", company_id, exc)

        rows = [
            AttendanceWithName(
                attendance_id=a.attendance_id,
                date=a.date,
                status=a.status,
                employee_id=a.employee_id,
            )
            for a in sorted(attendance, key=lambda a: a.date, reverse=True)
        ]
        return Success(join_activity(rows, build_employee_name_map(employees)))

    def _fetch_failed(self, what: str, company_id: str, exc: Exception) -> Failure:
        logger.warning("Fetch for %s failed (company=%s): %s", what, company_id, exc)
        return Failure(reason=f"Could not load data for the {what}. Please try again.", error=exc)

    @staticmethod
    def _pdf(stem: str, title: str, body: Sequence[Sequence[object]], *, header: Sequence[str]) -> ExportFile:
        return ExportFile(
            filename=f"{stem}.pdf",
            mimetype=PDF_MIMETYPE,
            content=render_table_pdf(title, header, body),
        )

    @staticmethod
    def _xlsx(stem: str, body: Sequence[Sequence[object]], *, header: Sequence[str], sheet_name: str) -> ExportFile:
        return ExportFile(
            filename=f"{stem}.xlsx",
            mimetype=XLSX_MIMETYPE,
            content=render_sheet_xlsx(header, body, sheet_name=sheet_name),
        )
