from __future__ import annotations

from typing import List, Optional, Sequence

from ..dashboard.model import DashboardResponse
from ..dashboard.service import DashboardService
from ..reports.model import AttendanceReportResponse
from ..reports.service import AttendanceReportService
from ..unlocks.model import UnlockRequest, UnlockStats
from ..unlocks.service import UnlockRequestService


class AdminService:
    """The admin use cases, as consumed by the controller layer."""

    def __init__(
        self,
        dashboard: DashboardService,
        unlocks: UnlockRequestService,
        reports: AttendanceReportService,
    ):
        self._dashboard = dashboard
        self._unlocks = unlocks
        self._reports = reports

    def get_admin_dashboard(self) -> DashboardResponse:
        return self._dashboard.get_dashboard()

    def get_all_unlock_requests(self) -> Sequence[UnlockRequest]:
        return self._unlocks.list_all()

    def get_unlock_stats(self) -> UnlockStats:
        return self._unlocks.stats()

    def get_pending_unlock_requests(self) -> Sequence[UnlockRequest]:
        return self._unlocks.list_pending()

    def process_unlock_request(
        self,
        request_id: int,
        approve: bool,
        *,
        admin_user_id: Optional[int] = None,
    ) -> UnlockRequest:
        return self._unlocks.process(request_id, approve, admin_user_id=admin_user_id)

    def get_attendance_reports(self) -> List[AttendanceReportResponse]:
        return self._reports.build_session_reports()
