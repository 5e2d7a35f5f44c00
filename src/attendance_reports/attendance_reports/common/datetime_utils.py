from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-day window."""

    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end


def parse_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    return datetime.strptime(value, "%Y-%m").date()


def month_bounds(day: date) -> DateRange:
    """First and last calendar day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return DateRange(start=day.replace(day=1), end=day.replace(day=last))


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
