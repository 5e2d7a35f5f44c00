from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for page access."""

    OWNER = "OWNER"
    SUPERVISOR = "SUPERVISOR"


class AttendanceStatus(str, Enum):
    """Attendance status codes as stored in the database."""

    PRESENT = "P"
    ABSENT = "A"


class EmploymentType(str, Enum):
    FIXED = "FIXED"
    DAILY = "DAILY"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class OrphanPolicy(str, Enum):
    """What to do with attendance rows whose employee is not in the fetched list."""

    DROP = "drop"
    REPORT_UNKNOWN = "reportDefaultUnknown"


class ExportFormat(str, Enum):
    PDF = "pdf"
    XLSX = "xlsx"
