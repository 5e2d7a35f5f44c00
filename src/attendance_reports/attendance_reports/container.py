from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.constants import DATE_DISPLAY_FORMAT, RECENT_ACTIVITY_LIMIT
from .core.enums import OrphanPolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .reports.service import ReportsService
from .supervisors.mysql_supervisor_repository import MySQLSupervisorRepository
from .supervisors.service import SupervisorProfileService


@dataclass(frozen=True)
class Container:
    reports_service: ReportsService
    supervisor_service: SupervisorProfileService
    conn: Optional[DatabaseConnection] = None


def build_container(*, db_config: dict, settings: Optional[Any] = None) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    supervisors_repo = MySQLSupervisorRepository(conn)

    on_orphan = OrphanPolicy(getattr(settings, "ORPHAN_POLICY", OrphanPolicy.DROP.value))

    reports_service = ReportsService(employees_repo, attendance_repo, on_orphan=on_orphan)
    supervisor_service = SupervisorProfileService(
        supervisors_repo,
        employees_repo,
        attendance_repo,
        recent_limit=int(getattr(settings, "RECENT_ACTIVITY_LIMIT", RECENT_ACTIVITY_LIMIT)),
        date_format=getattr(settings, "DATE_DISPLAY_FORMAT", DATE_DISPLAY_FORMAT),
    )

    return Container(reports_service=reports_service, supervisor_service=supervisor_service, conn=conn)
