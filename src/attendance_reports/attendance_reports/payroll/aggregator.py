"""Attendance-wage aggregation.

Joins attendance rows to employees by id, counts present days and derives a
wage per employee. Pure: no I/O, no shared state, never raises on missing
rate or salary fields.
"""

from __future__ import annotations

import logging
from collections import Counter
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import DateRange
from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import OrphanPolicy
from ..employees.model import Employee
from .calculator.base import WageCalculator
from .calculator.standard_calculator import StandardWageCalculator
from .model import WageSummaryRow

logger = logging.getLogger(__name__)


def aggregate(
    employees: Sequence[Employee],
    attendance: Iterable[AttendanceRecord],
    *,
    period: Optional[DateRange] = None,
    calculator: Optional[WageCalculator] = None,
    on_orphan: OrphanPolicy = OrphanPolicy.DROP,
) -> list[WageSummaryRow]:
    """One summary row per employee, in input order.

    Attendance outside ``period`` (when given) is ignored. Rows whose
    ``employee_id`` matches no employee never count towards anyone; with
    ``OrphanPolicy.REPORT_UNKNOWN`` they are summarized in extra "Unknown"
    rows appended after the employees.
    """

    calculator = calculator or StandardWageCalculator()
    known_ids = {e.employee_id for e in employees}

    present: Counter[str] = Counter()
    absent: Counter[str] = Counter()
    orphan_ids: list[str] = []

    for record in attendance:
        if period is not None and record.date not in period:
            continue
        if record.employee_id not in known_ids and record.employee_id not in orphan_ids:
            orphan_ids.append(record.employee_id)
        if record.is_present:
            present[record.employee_id] += 1
        else:
            absent[record.employee_id] += 1

    rows = [
        WageSummaryRow(
            employee_name=emp.full_name,
            employee_id=emp.employee_id,
            present_days=present[emp.employee_id],
            wage=calculator.wage(emp, present[emp.employee_id]),
            absent_days=absent[emp.employee_id],
        )
        for emp in employees
    ]

    if orphan_ids:
        orphan_rows = sum(present[i] + absent[i] for i in orphan_ids)
        logger.warning(
            "%d attendance row(s) reference %d unknown employee id(s); policy=%s",
            orphan_rows,
            len(orphan_ids),
            on_orphan.value,
        )

    if on_orphan is OrphanPolicy.REPORT_UNKNOWN:
        rows.extend(
            WageSummaryRow(
                employee_name=UNKNOWN_EMPLOYEE_NAME,
                employee_id=orphan_id,
                present_days=present[orphan_id],
                wage=Decimal(0),
                absent_days=absent[orphan_id],
            )
            for orphan_id in orphan_ids
        )

    return rows
