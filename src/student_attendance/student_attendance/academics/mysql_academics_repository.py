from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count
from .repository import AcademicsRepository


class MySQLAcademicsRepository(AcademicsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _count(self, sql: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            return fetch_count(cur)

    def count_active_teachers(self) -> int:
        return self._count("SELECT COUNT(*) AS n FROM teachers WHERE active=1")

    def count_active_students(self) -> int:
        return self._count("SELECT COUNT(*) AS n FROM students WHERE active=1")

    def count_classes(self) -> int:
        return self._count("SELECT COUNT(*) AS n FROM classes")

    def count_courses(self) -> int:
        return self._count("SELECT COUNT(*) AS n FROM courses")
