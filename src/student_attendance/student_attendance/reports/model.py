from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NamedTuple


class SessionKey(NamedTuple):
    """Identifies one attendance session: a course on a given day."""

    course_id: int
    date: date


@dataclass(frozen=True)
class AttendanceReportResponse:
    class_label: str
    course_name: str
    teacher_name: str
    date: date
    total_students: int
    present_count: int
    absent_count: int
    percentage: float
    status_label: str

    def to_dict(self) -> dict:
        return {
            "class_name": self.class_label,
            "course_name": self.course_name,
            "teacher_name": self.teacher_name,
            "date": self.date.isoformat(),
            "total_students": self.total_students,
            "present_count": self.present_count,
            "absent_count": self.absent_count,
            "percentage": self.percentage,
            "status": self.status_label,
        }
