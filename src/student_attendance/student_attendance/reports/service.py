from __future__ import annotations

from typing import Dict, List, Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.numbers import round_half_up
from ..core.constants import (
    ATTENDANCE_RATE_FALLBACK_LABEL,
    ATTENDANCE_RATE_LABELS,
    PLACEHOLDER_DASH,
    PLACEHOLDER_TEACHER_UNKNOWN,
)
from ..core.enums import is_present
from .model import AttendanceReportResponse, SessionKey


def attendance_percentage(present: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round_half_up(present / total * 100, 1)


def rate_label(percentage: float) -> str:
    for lower_bound, label in ATTENDANCE_RATE_LABELS:
        if percentage >= lower_bound:
            return label
    return ATTENDANCE_RATE_FALLBACK_LABEL


def group_by_session(rows: Sequence[AttendanceReportRow]) -> Dict[SessionKey, List[AttendanceReportRow]]:
    """Group rows by (course, date), keeping first-seen order."""
    groups: Dict[SessionKey, List[AttendanceReportRow]] = {}
    for row in rows:
        groups.setdefault(SessionKey(row.course_id, row.date), []).append(row)
    return groups


class AttendanceReportService:
    """Per-session attendance summary for the admin report page."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_session_reports(self) -> List[AttendanceReportResponse]:
        groups = group_by_session(self._attendance.list_report_rows())

        reports = [self._summarize(rows) for rows in groups.values() if rows]
        reports.sort(key=lambda r: r.date, reverse=True)
        return reports

    @staticmethod
    def _summarize(rows: Sequence[AttendanceReportRow]) -> AttendanceReportResponse:
        first = rows[0]
        total = len(rows)
        present = sum(1 for r in rows if is_present(r.status))
        percentage = attendance_percentage(present, total)

        if first.class_name is not None:
            class_label = f"{first.class_name} {first.section or ''}".strip()
        else:
            class_label = PLACEHOLDER_DASH

        return AttendanceReportResponse(
            class_label=class_label,
            course_name=first.course_name or PLACEHOLDER_DASH,
            teacher_name=first.teacher_name or PLACEHOLDER_TEACHER_UNKNOWN,
            date=first.date,
            total_students=total,
            present_count=present,
            absent_count=total - present,
            percentage=percentage,
            status_label=rate_label(percentage),
        )
