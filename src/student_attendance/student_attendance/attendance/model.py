from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's mark for one course session."""

    attendance_id: int
    student_id: int
    course_id: int
    date: date
    status: str
    marked_at: Optional[datetime] = None
    is_locked: bool = True
    unlock_approved_by: Optional[int] = None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports and the activity feed (joined with course/class/teacher)."""

    attendance_id: int
    course_id: int
    date: date
    status: str
    marked_at: Optional[datetime] = None
    course_name: Optional[str] = None
    class_name: Optional[str] = None
    section: Optional[str] = None
    teacher_name: Optional[str] = None
