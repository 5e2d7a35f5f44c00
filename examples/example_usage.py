"""Example: use the aggregation layer directly (no Flask, no database).

Controllers are a thin layer; the wage logic lives in ``payroll.aggregator``.
"""

from datetime import date
from decimal import Decimal

from src.attendance_reports.attendance_reports.attendance.model import AttendanceRecord
from src.attendance_reports.attendance_reports.core.enums import AttendanceStatus
from src.attendance_reports.attendance_reports.employees.model import Employee
from src.attendance_reports.attendance_reports.payroll.aggregator import aggregate


def main():
    employees = [Employee(employee_id="E1", full_name="Alice", daily_rate=Decimal("500"))]
    attendance = [
        AttendanceRecord("1", "E1", date(2024, 3, 1), AttendanceStatus.PRESENT),
        AttendanceRecord("2", "E1", date(2024, 3, 2), AttendanceStatus.ABSENT),
        AttendanceRecord("3", "E1", date(2024, 3, 3), AttendanceStatus.PRESENT),
    ]
    for row in aggregate(employees, attendance):
        print(row)


if __name__ == "__main__":
    main()
