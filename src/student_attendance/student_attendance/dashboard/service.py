from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..academics.repository import AcademicsRepository
from .activity_feed import ActivityFeedBuilder
from .model import DashboardResponse


class DashboardService:
    def __init__(self, academics: AcademicsRepository, feed: ActivityFeedBuilder):
        self._academics = academics
        self._feed = feed

    def get_dashboard(self, *, now: Optional[datetime] = None) -> DashboardResponse:
        return DashboardResponse(
            total_teachers=self._academics.count_active_teachers(),
            total_students=self._academics.count_active_students(),
            total_classes=self._academics.count_classes(),
            total_courses=self._academics.count_courses(),
            recent_activities=self._feed.build(now=now),
        )
