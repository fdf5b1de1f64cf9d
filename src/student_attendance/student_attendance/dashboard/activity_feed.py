from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Set

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_time_ago, now_local
from ..core.constants import (
    FEED_ATTENDANCE_LIMIT,
    FEED_MAX_ITEMS,
    FEED_UNLOCK_LIMIT,
    ICON_ATTENDANCE,
    ICON_UNLOCK,
    PLACEHOLDER_COURSE,
    PLACEHOLDER_TEACHER,
    SEVERITY_INFO,
    SEVERITY_SUCCESS,
    SEVERITY_WARNING,
)
from ..core.enums import UnlockStatus
from ..reports.model import SessionKey
from ..unlocks.repository import UnlockRequestRepository
from .model import ActivityDTO


class ActivityFeedBuilder:
    """Merges recent unlock requests and attendance markings into one feed."""

    def __init__(
        self,
        requests: UnlockRequestRepository,
        attendance: AttendanceRepository,
        *,
        unlock_limit: int = FEED_UNLOCK_LIMIT,
        attendance_limit: int = FEED_ATTENDANCE_LIMIT,
        max_items: int = FEED_MAX_ITEMS,
    ):
        self._requests = requests
        self._attendance = attendance
        self._unlock_limit = int(unlock_limit)
        self._attendance_limit = int(attendance_limit)
        self._max_items = int(max_items)

    def build(self, *, now: Optional[datetime] = None) -> List[ActivityDTO]:
        now = now or now_local()
        activities = self._unlock_activities(now) + self._attendance_activities(now)
        # sort() is stable: ties keep unlock entries ahead of attendance ones
        activities.sort(key=lambda a: a.timestamp, reverse=True)
        return activities[: self._max_items]

    def _unlock_activities(self, now: datetime) -> List[ActivityDTO]:
        out: List[ActivityDTO] = []
        for req in list(self._requests.list_all_desc())[: self._unlock_limit]:
            teacher = req.teacher_name or PLACEHOLDER_TEACHER
            out.append(
                ActivityDTO(
                    description=f"Unlock request {req.status.value.lower()} for {teacher}",
                    time_ago=format_time_ago(req.created_at, now=now),
                    icon=ICON_UNLOCK,
                    severity=SEVERITY_WARNING if req.status == UnlockStatus.PENDING else SEVERITY_INFO,
                    timestamp=req.created_at,
                )
            )
        return out

    def _attendance_activities(self, now: datetime) -> List[ActivityDTO]:
        out: List[ActivityDTO] = []
        seen: Set[SessionKey] = set()
        for row in self._attendance.list_recent_marked(self._attendance_limit):
            if row.marked_at is None:
                continue
            key = SessionKey(row.course_id, row.date)
            if key in seen:
                continue
            seen.add(key)
            out.append(
                ActivityDTO(
                    description=f"Attendance marked for {row.course_name or PLACEHOLDER_COURSE}",
                    time_ago=format_time_ago(row.marked_at, now=now),
                    icon=ICON_ATTENDANCE,
                    severity=SEVERITY_SUCCESS,
                    timestamp=row.marked_at,
                )
            )
        return out
