from decimal import Decimal

from src.attendance_reports.attendance_reports.employees.model import Employee
from src.attendance_reports.attendance_reports.payroll.calculator.standard_calculator import StandardWageCalculator


def test_monthly_salary_wins_over_daily_rate():
    emp = Employee(employee_id="E1", full_name="A", daily_rate=Decimal("500"), monthly_salary=Decimal("15000"))

    calc = StandardWageCalculator()
    assert calc.wage(emp, 10) == Decimal("15000")


def test_daily_rate_times_present_days_without_salary():
    emp = Employee(employee_id="E1", full_name="A", daily_rate=Decimal("500"))

    calc = StandardWageCalculator()
    assert calc.wage(emp, 12) == Decimal("6000")


def test_missing_rate_and_salary_is_zero():
    emp = Employee(employee_id="E1", full_name="A")

    calc = StandardWageCalculator()
    assert calc.wage(emp, 5) == 0


def test_zero_salary_falls_back_to_daily_rate():
    emp = Employee(employee_id="E1", full_name="A", daily_rate=Decimal("300"), monthly_salary=Decimal("0"))

    calc = StandardWageCalculator()
    assert calc.wage(emp, 4) == Decimal("1200")
