from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...employees.model import Employee


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def wage(self, employee: Employee, present_days: int) -> Decimal:
        raise NotImplementedError
