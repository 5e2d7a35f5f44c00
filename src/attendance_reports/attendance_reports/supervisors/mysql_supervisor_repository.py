from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import SupervisorRepository


class MySQLSupervisorRepository(SupervisorRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_full_name(self, supervisor_id: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT full_name FROM supervisor WHERE supervisor_id=%s",
                (supervisor_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return row.get("full_name")
