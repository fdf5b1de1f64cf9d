from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..database.unit_of_work import Transaction
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_REPORT_SELECT = """
    SELECT
        a.attendance_id, a.course_id, a.date, a.status, a.marked_at,
        c.course_name,
        cl.class_name, cl.section,
        t.name AS teacher_name
    FROM attendance a
    JOIN courses c ON c.course_id = a.course_id
    LEFT JOIN classes cl ON cl.class_id = c.class_id
    LEFT JOIN teachers t ON t.teacher_id = c.teacher_id
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    approved_by = r.get("unlock_approved_by")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        student_id=int(r["student_id"]),
        course_id=int(r["course_id"]),
        date=r["date"],
        status=str(r["status"]),
        marked_at=r.get("marked_at"),
        is_locked=bool(r.get("is_locked")),
        unlock_approved_by=int(approved_by) if approved_by is not None else None,
    )


def _to_report_row(r: Dict[str, Any]) -> AttendanceReportRow:
    return AttendanceReportRow(
        attendance_id=int(r["attendance_id"]),
        course_id=int(r["course_id"]),
        date=r["date"],
        status=str(r["status"]),
        marked_at=r.get("marked_at"),
        course_name=r.get("course_name"),
        class_name=r.get("class_name"),
        section=r.get("section"),
        teacher_name=r.get("teacher_name"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_course_and_date(
        self,
        *,
        course_id: int,
        session_date: date,
        tx: Optional[Transaction] = None,
    ) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory, tx=tx) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, course_id, date, status,
                       marked_at, is_locked, unlock_approved_by
                FROM attendance
                WHERE course_id=%s AND date=%s
                ORDER BY attendance_id
                """,
                (int(course_id), session_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_recent_marked(self, limit: int) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _REPORT_SELECT
                + """
                WHERE a.marked_at IS NOT NULL
                ORDER BY a.marked_at DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [_to_report_row(r) for r in fetchall(cur)]

    def list_report_rows(self) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_REPORT_SELECT + " ORDER BY a.date DESC, a.course_id ASC, a.attendance_id ASC")
            return [_to_report_row(r) for r in fetchall(cur)]

    def save_all(self, records: Sequence[AttendanceRecord], *, tx: Optional[Transaction] = None) -> None:
        if not records:
            return
        with db_cursor(self._conn_factory, tx=tx) as (_, cur):
            cur.executemany(
                """
                UPDATE attendance
                SET status=%s, marked_at=%s, is_locked=%s, unlock_approved_by=%s
                WHERE attendance_id=%s
                """,
                [
                    (
                        r.status,
                        r.marked_at,
                        1 if r.is_locked else 0,
                        r.unlock_approved_by,
                        int(r.attendance_id),
                    )
                    for r in records
                ],
            )
