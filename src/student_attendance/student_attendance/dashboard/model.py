from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass(frozen=True)
class ActivityDTO:
    description: str
    time_ago: str
    icon: str
    severity: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "time_ago": self.time_ago,
            "icon": self.icon,
            "type": self.severity,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class DashboardResponse:
    total_teachers: int
    total_students: int
    total_classes: int
    total_courses: int
    recent_activities: List[ActivityDTO] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_teachers": self.total_teachers,
            "total_students": self.total_students,
            "total_classes": self.total_classes,
            "total_courses": self.total_courses,
            "recent_activities": [a.to_dict() for a in self.recent_activities],
        }
