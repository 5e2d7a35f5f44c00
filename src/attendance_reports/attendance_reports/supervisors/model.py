from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import ActivityRecord
from ..employees.model import Employee


@dataclass(frozen=True)
class SupervisorStats:
    total_assigned: int
    active_employees: int
    recent_attendance: int


@dataclass(frozen=True)
class SupervisorProfile:
    """Everything the supervisor profile page shows, built per request."""

    supervisor_id: str
    full_name: str
    email: Optional[str]
    stats: SupervisorStats
    employees: list[Employee] = field(default_factory=list)
    activities: list[ActivityRecord] = field(default_factory=list)
