from __future__ import annotations

from decimal import Decimal

from .base import WageCalculator
from ...employees.model import Employee


class StandardWageCalculator(WageCalculator):
    """Standard rule: a set monthly salary wins, else daily rate x present days.

    A zero monthly salary counts as unset. Missing rate means a wage of 0.
    """

    def wage(self, employee: Employee, present_days: int) -> Decimal:
        if employee.monthly_salary:
            return employee.monthly_salary
        daily_rate = employee.daily_rate or Decimal(0)
        return daily_rate * present_days
