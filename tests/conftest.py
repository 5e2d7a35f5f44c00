from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.attendance_reports.attendance_reports.attendance.model import AttendanceRecord, AttendanceWithName
from src.attendance_reports.attendance_reports.core.enums import AttendanceStatus, EmployeeStatus, EmploymentType
from src.attendance_reports.attendance_reports.core.exceptions import FetchError
from src.attendance_reports.attendance_reports.employees.model import Employee


class InMemoryEmployees:
    def __init__(self, employees, *, fail: bool = False):
        self._employees = list(employees)
        self._fail = fail
        self.calls: list[dict] = []

    def list_for_company(self, company_id: str, *, supervisor_id: Optional[str] = None):
        self.calls.append({"company_id": company_id, "supervisor_id": supervisor_id})
        if self._fail:
            raise FetchError("connection refused")
        return [
            e
            for e in self._employees
            if e.company_id == company_id and (supervisor_id is None or e.supervisor_id == supervisor_id)
        ]


class InMemoryAttendance:
    def __init__(self, records, *, names: Optional[dict[str, str]] = None, fail: bool = False):
        self._records = list(records)
        self._names = names or {}
        self._fail = fail
        self.calls: list[dict] = []

    def list_for_company(self, company_id, *, start_date=None, end_date=None, employee_id=None):
        self.calls.append(
            {"company_id": company_id, "start_date": start_date, "end_date": end_date, "employee_id": employee_id}
        )
        if self._fail:
            raise FetchError("query rejected")
        return [
            r
            for r in self._records
            if r.company_id == company_id
            and (start_date is None or r.date >= start_date)
            and (end_date is None or r.date <= end_date)
            and (employee_id is None or r.employee_id == employee_id)
        ]

    def list_recent_marked_by(self, company_id, supervisor_id, *, limit):
        self.calls.append({"company_id": company_id, "supervisor_id": supervisor_id, "limit": limit})
        if self._fail:
            raise FetchError("query rejected")
        items = [r for r in self._records if r.company_id == company_id and r.marked_by_supervisor == supervisor_id]
        items.sort(key=lambda r: r.date, reverse=True)
        return [
            AttendanceWithName(
                attendance_id=r.attendance_id,
                date=r.date,
                status=r.status,
                employee_id=r.employee_id,
                employee_name=self._names.get(r.employee_id),
            )
            for r in items[:limit]
        ]


class InMemorySupervisors:
    def __init__(self, names: dict[str, str]):
        self._names = names

    def get_full_name(self, supervisor_id: str) -> Optional[str]:
        return self._names.get(supervisor_id)


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 3, 20)


@pytest.fixture
def employees() -> list[Employee]:
    return [
        Employee(
            employee_id="E1",
            full_name="Alice",
            company_id="C1",
            mobile="9000000001",
            daily_rate=Decimal("500"),
            employment_type=EmploymentType.DAILY,
            supervisor_id="S1",
        ),
        Employee(
            employee_id="E2",
            full_name="Bob",
            company_id="C1",
            phone="9000000002",
            monthly_salary=Decimal("15000"),
            employment_type=EmploymentType.FIXED,
            status=EmployeeStatus.INACTIVE,
            supervisor_id="S1",
            aadhar="1234",
            pan="ABCDE1234F",
        ),
        Employee(employee_id="E3", full_name="Cid", company_id="C1", supervisor_id="S2"),
    ]


@pytest.fixture
def attendance() -> list[AttendanceRecord]:
    P, A = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT
    return [
        AttendanceRecord("a1", "E1", date(2024, 3, 1), P, "C1", marked_by_supervisor="S1"),
        AttendanceRecord("a2", "E1", date(2024, 3, 2), A, "C1", marked_by_supervisor="S1"),
        AttendanceRecord("a3", "E1", date(2024, 3, 3), P, "C1", marked_by_owner="O1"),
        AttendanceRecord("a4", "E2", date(2024, 3, 3), P, "C1", marked_by_supervisor="S1"),
        AttendanceRecord("a5", "E1", date(2024, 2, 28), P, "C1", marked_by_supervisor="S1"),
        AttendanceRecord("a6", "GHOST", date(2024, 3, 4), P, "C1", marked_by_supervisor="S1"),
    ]


@pytest.fixture
def fakes():
    """In-memory repository classes, for tests that need failing or custom data."""

    class _Fakes:
        Employees = InMemoryEmployees
        Attendance = InMemoryAttendance
        Supervisors = InMemorySupervisors

    return _Fakes


@pytest.fixture
def employees_repo(employees):
    return InMemoryEmployees(employees)


@pytest.fixture
def attendance_repo(attendance, employees):
    return InMemoryAttendance(attendance, names={e.employee_id: e.full_name for e in employees})


@pytest.fixture
def supervisors_repo():
    return InMemorySupervisors({"S1": "Sam Supervisor"})
