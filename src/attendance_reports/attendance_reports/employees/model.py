from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.validators import optional_amount, optional_text, require_enum, require_non_empty
from ..core.enums import EmployeeStatus, EmploymentType


@dataclass(frozen=True)
class Employee:
    """Domain entity: a person eligible for attendance tracking.

    Note: Plain data object (no DB access code). ``daily_rate`` and
    ``monthly_salary`` stay ``None`` when the column is NULL; the wage
    calculator decides how to default them.
    """

    employee_id: str
    full_name: str
    company_id: Optional[str] = None
    mobile: Optional[str] = None
    phone: Optional[str] = None
    daily_rate: Optional[Decimal] = None
    monthly_salary: Optional[Decimal] = None
    employment_type: Optional[EmploymentType] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    supervisor_id: Optional[str] = None
    aadhar: Optional[str] = None
    pan: Optional[str] = None

    @property
    def contact(self) -> Optional[str]:
        return self.mobile or self.phone

    @property
    def is_active(self) -> bool:
        return self.status is EmployeeStatus.ACTIVE

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Employee":
        employment_type = row.get("employment_type")
        return cls(
            employee_id=require_non_empty(row.get("employee_id"), "employee_id"),
            full_name=require_non_empty(row.get("full_name"), "full_name"),
            company_id=optional_text(row.get("company_id")),
            mobile=optional_text(row.get("mobile")),
            phone=optional_text(row.get("phone")),
            daily_rate=optional_amount(row.get("daily_rate"), "daily_rate"),
            monthly_salary=optional_amount(row.get("monthly_salary"), "monthly_salary"),
            employment_type=(
                require_enum(EmploymentType, employment_type, "employment_type") if employment_type else None
            ),
            status=require_enum(EmployeeStatus, row.get("status") or EmployeeStatus.ACTIVE.value, "status"),
            supervisor_id=optional_text(row.get("supervisor_id")),
            aadhar=optional_text(row.get("aadhar")),
            pan=optional_text(row.get("pan")),
        )
