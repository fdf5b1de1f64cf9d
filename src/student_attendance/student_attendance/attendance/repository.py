from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..database.unit_of_work import Transaction
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def list_for_course_and_date(
        self,
        *,
        course_id: int,
        session_date: date,
        tx: Optional[Transaction] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_recent_marked(self, limit: int) -> Sequence[AttendanceReportRow]:
        """Most recently marked rows first."""

        raise NotImplementedError

    def list_report_rows(self) -> Sequence[AttendanceReportRow]:
        """Every attendance row, joined for reporting. No pagination."""

        raise NotImplementedError

    def save_all(self, records: Sequence[AttendanceRecord], *, tx: Optional[Transaction] = None) -> None:
        raise NotImplementedError
