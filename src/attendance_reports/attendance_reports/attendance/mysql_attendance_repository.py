from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord, AttendanceWithName
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_company(
        self,
        company_id: str,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["company_id=%s"]
        params: list[object] = [company_id]

        if start_date is not None:
            clauses.append("date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("date <= %s")
            params.append(end_date)
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(employee_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    attendance_id, employee_id, date, status, company_id,
                    marked_by_owner, marked_by_supervisor
                FROM attendance
                WHERE {where}
                ORDER BY date DESC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [AttendanceRecord.from_row(r) for r in rows]

    def list_recent_marked_by(self, company_id: str, supervisor_id: str, *, limit: int) -> Sequence[AttendanceWithName]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.attendance_id, a.date, a.status, a.employee_id, e.full_name
                FROM attendance a
                LEFT JOIN employee e ON e.employee_id = a.employee_id
                WHERE a.company_id=%s AND a.marked_by_supervisor=%s
                ORDER BY a.date DESC
                LIMIT %s
                """,
                (company_id, supervisor_id, int(limit)),
            )
            rows = fetchall(cur)
            return [AttendanceWithName.from_row(r) for r in rows]
