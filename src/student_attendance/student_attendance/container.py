from __future__ import annotations

from dataclasses import dataclass

from .academics.mysql_academics_repository import MySQLAcademicsRepository
from .academics.repository import AcademicsRepository
from .admin.service import AdminService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .core.constants import FEED_ATTENDANCE_LIMIT, FEED_MAX_ITEMS, FEED_UNLOCK_LIMIT
from .dashboard.activity_feed import ActivityFeedBuilder
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .database.unit_of_work import MySQLUnitOfWork, UnitOfWork
from .reports.service import AttendanceReportService
from .unlocks.mysql_unlock_repository import MySQLUnlockRequestRepository
from .unlocks.repository import UnlockRequestRepository
from .unlocks.service import UnlockRequestService


@dataclass(frozen=True)
class Container:
    academics_repo: AcademicsRepository
    attendance_repo: AttendanceRepository
    unlock_requests_repo: UnlockRequestRepository
    uow: UnitOfWork

    dashboard_service: DashboardService
    unlock_service: UnlockRequestService
    report_service: AttendanceReportService
    admin_service: AdminService


def wire(
    *,
    academics_repo: AcademicsRepository,
    attendance_repo: AttendanceRepository,
    unlock_requests_repo: UnlockRequestRepository,
    uow: UnitOfWork,
    feed_settings: dict | None = None,
) -> Container:
    """Build services on top of already constructed repositories."""
    feed_settings = feed_settings or {}
    feed = ActivityFeedBuilder(
        unlock_requests_repo,
        attendance_repo,
        unlock_limit=int(feed_settings.get("unlock_limit", FEED_UNLOCK_LIMIT)),
        attendance_limit=int(feed_settings.get("attendance_limit", FEED_ATTENDANCE_LIMIT)),
        max_items=int(feed_settings.get("max_items", FEED_MAX_ITEMS)),
    )
    dashboard_service = DashboardService(academics_repo, feed)
    unlock_service = UnlockRequestService(unlock_requests_repo, attendance_repo, uow)
    report_service = AttendanceReportService(attendance_repo)
    admin_service = AdminService(dashboard_service, unlock_service, report_service)

    return Container(
        academics_repo=academics_repo,
        attendance_repo=attendance_repo,
        unlock_requests_repo=unlock_requests_repo,
        uow=uow,
        dashboard_service=dashboard_service,
        unlock_service=unlock_service,
        report_service=report_service,
        admin_service=admin_service,
    )


def build_container(*, db_config: dict, feed_settings: dict | None = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        academics_repo=MySQLAcademicsRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        unlock_requests_repo=MySQLUnlockRequestRepository(conn),
        uow=MySQLUnitOfWork(conn),
        feed_settings=feed_settings,
    )
