from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_company(self, company_id: str, *, supervisor_id: Optional[str] = None) -> Sequence[Employee]:
        clauses = ["company_id=%s"]
        params: list[object] = [company_id]

        if supervisor_id is not None:
            clauses.append("supervisor_id=%s")
            params.append(supervisor_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    employee_id, full_name, company_id, mobile, phone,
                    daily_rate, monthly_salary, employment_type, status,
                    supervisor_id, aadhar, pan
                FROM employee
                WHERE {where}
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [Employee.from_row(r) for r in rows]
