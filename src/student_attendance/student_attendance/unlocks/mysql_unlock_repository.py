from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import UnlockStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetch_count, fetchall, fetchone
from ..database.unit_of_work import Transaction
from .model import UnlockRequest
from .repository import UnlockRequestRepository

_SELECT = """
    SELECT
        r.request_id, r.teacher_id, r.course_id, r.request_date, r.reason,
        r.status, r.created_at, r.processed_by, r.processed_at,
        t.name AS teacher_name,
        c.course_name
    FROM unlock_requests r
    LEFT JOIN teachers t ON t.teacher_id = r.teacher_id
    LEFT JOIN courses c ON c.course_id = r.course_id
"""


def _to_request(r: Dict[str, Any]) -> UnlockRequest:
    teacher_id = r.get("teacher_id")
    processed_by = r.get("processed_by")
    return UnlockRequest(
        request_id=int(r["request_id"]),
        teacher_id=int(teacher_id) if teacher_id is not None else None,
        course_id=int(r["course_id"]),
        request_date=r["request_date"],
        status=UnlockStatus(r["status"]),
        created_at=r["created_at"],
        reason=r.get("reason"),
        processed_by=int(processed_by) if processed_by is not None else None,
        processed_at=r.get("processed_at"),
        teacher_name=r.get("teacher_name"),
        course_name=r.get("course_name"),
    )


class MySQLUnlockRequestRepository(UnlockRequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all_desc(self) -> Sequence[UnlockRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY r.created_at DESC, r.request_id DESC")
            return [_to_request(r) for r in fetchall(cur)]

    def list_by_status(self, status: UnlockStatus) -> Sequence[UnlockRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE r.status=%s ORDER BY r.created_at DESC, r.request_id DESC",
                (status.value,),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def count_by_status(self, status: UnlockStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM unlock_requests WHERE status=%s", (status.value,))
            return fetch_count(cur)

    def get_by_id(
        self,
        request_id: int,
        *,
        tx: Optional[Transaction] = None,
        for_update: bool = False,
    ) -> Optional[UnlockRequest]:
        sql = _SELECT + " WHERE r.request_id=%s"
        if for_update:
            # Locks only the unlock_requests row.
            sql += " FOR UPDATE OF r"
        with db_cursor(self._conn_factory, tx=tx) as (_, cur):
            cur.execute(sql, (int(request_id),))
            r = fetchone(cur)
            if not r:
                return None
            return _to_request(r)

    def save(self, request: UnlockRequest, *, tx: Optional[Transaction] = None) -> UnlockRequest:
        with db_cursor(self._conn_factory, tx=tx) as (_, cur):
            cur.execute(
                """
                UPDATE unlock_requests
                SET status=%s, processed_by=%s, processed_at=%s
                WHERE request_id=%s
                """,
                (
                    request.status.value,
                    request.processed_by,
                    request.processed_at,
                    int(request.request_id),
                ),
            )
        return request
