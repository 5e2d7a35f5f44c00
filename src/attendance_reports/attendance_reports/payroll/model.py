from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class WageSummaryRow:
    """Aggregator output; recomputed per request, never persisted."""

    employee_name: str
    employee_id: str
    present_days: int
    wage: Decimal
    absent_days: int = 0
