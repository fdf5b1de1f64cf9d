from __future__ import annotations

from datetime import date, datetime, timedelta

from src.student_attendance.student_attendance.attendance.model import AttendanceReportRow
from src.student_attendance.student_attendance.core.enums import UnlockStatus
from src.student_attendance.student_attendance.dashboard.activity_feed import ActivityFeedBuilder
from src.student_attendance.student_attendance.dashboard.service import DashboardService
from src.student_attendance.student_attendance.unlocks.model import UnlockRequest


class FakeUnlockRepo:
    def __init__(self, requests):
        self._requests = requests

    def list_all_desc(self):
        return sorted(self._requests, key=lambda r: r.created_at, reverse=True)


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.limits = []

    def list_recent_marked(self, limit):
        self.limits.append(limit)
        return list(self._rows)[:limit]


class FakeAcademicsRepo:
    def count_active_teachers(self):
        return 4

    def count_active_students(self):
        return 120

    def count_classes(self):
        return 6

    def count_courses(self):
        return 18


def _request(request_id, created_at, *, status=UnlockStatus.PENDING, teacher_name="Ms. Rao"):
    return UnlockRequest(
        request_id=request_id,
        teacher_id=1 if teacher_name else None,
        course_id=7,
        request_date=date(2026, 1, 30),
        status=status,
        created_at=created_at,
        teacher_name=teacher_name,
    )


def _marked(course_id, day, marked_at, *, course_name="Math"):
    return AttendanceReportRow(
        attendance_id=0,
        course_id=course_id,
        date=day,
        status="PRESENT",
        marked_at=marked_at,
        course_name=course_name,
    )


def test_feed_merges_sources_newest_first_and_caps_at_five(fixed_now):
    requests = [_request(i, fixed_now - timedelta(hours=i)) for i in range(1, 6)]
    rows = [
        _marked(1, date(2026, 2, 1), fixed_now - timedelta(minutes=30)),
        _marked(2, date(2026, 2, 1), fixed_now - timedelta(hours=2, minutes=30), course_name="Science"),
        _marked(3, date(2026, 2, 1), fixed_now - timedelta(days=3), course_name="Art"),
    ]
    attendance = FakeAttendanceRepo(rows)

    feed = ActivityFeedBuilder(FakeUnlockRepo(requests), attendance).build(now=fixed_now)

    assert len(feed) == 5
    assert [a.timestamp for a in feed] == sorted((a.timestamp for a in feed), reverse=True)
    assert [a.description for a in feed] == [
        "Attendance marked for Math",
        "Unlock request pending for Ms. Rao",
        "Unlock request pending for Ms. Rao",
        "Attendance marked for Science",
        "Unlock request pending for Ms. Rao",
    ]
    assert feed[0].time_ago == "30 mins ago"
    assert feed[1].time_ago == "1 hours ago"
    assert attendance.limits == [5]


def test_only_three_most_recent_unlock_requests_are_used(fixed_now):
    requests = [_request(i, fixed_now - timedelta(minutes=i)) for i in range(1, 6)]
    feed = ActivityFeedBuilder(FakeUnlockRepo(requests), FakeAttendanceRepo([])).build(now=fixed_now)

    assert len(feed) == 3
    assert [a.timestamp for a in feed] == [fixed_now - timedelta(minutes=i) for i in (1, 2, 3)]


def test_same_session_collapses_to_first_seen_marking(fixed_now):
    first = fixed_now - timedelta(minutes=5)
    rows = [
        _marked(1, date(2026, 2, 1), first),
        _marked(1, date(2026, 2, 1), fixed_now - timedelta(minutes=6)),
        _marked(1, date(2026, 1, 31), fixed_now - timedelta(days=1)),
    ]
    feed = ActivityFeedBuilder(FakeUnlockRepo([]), FakeAttendanceRepo(rows)).build(now=fixed_now)

    assert [a.timestamp for a in feed] == [first, fixed_now - timedelta(days=1)]


def test_rows_without_marked_at_are_skipped(fixed_now):
    rows = [_marked(1, date(2026, 2, 1), None), _marked(2, date(2026, 2, 1), fixed_now)]
    feed = ActivityFeedBuilder(FakeUnlockRepo([]), FakeAttendanceRepo(rows)).build(now=fixed_now)

    assert len(feed) == 1
    assert feed[0].time_ago == "Just now"


def test_tags_and_placeholders(fixed_now):
    requests = [
        _request(1, fixed_now - timedelta(minutes=1), teacher_name=None),
        _request(2, fixed_now - timedelta(minutes=2), status=UnlockStatus.APPROVED),
        _request(3, fixed_now - timedelta(minutes=3), status=UnlockStatus.REJECTED),
    ]
    rows = [_marked(1, date(2026, 2, 1), fixed_now - timedelta(minutes=4), course_name=None)]
    feed = ActivityFeedBuilder(FakeUnlockRepo(requests), FakeAttendanceRepo(rows)).build(now=fixed_now)

    assert [(a.description, a.icon, a.severity) for a in feed] == [
        ("Unlock request pending for Teacher", "bi-lock", "warning"),
        ("Unlock request approved for Ms. Rao", "bi-lock", "info"),
        ("Unlock request rejected for Ms. Rao", "bi-lock", "info"),
        ("Attendance marked for Course", "bi-check-circle", "success"),
    ]


def test_empty_sources_give_empty_feed(fixed_now):
    assert ActivityFeedBuilder(FakeUnlockRepo([]), FakeAttendanceRepo([])).build(now=fixed_now) == []


def test_dashboard_combines_counts_and_feed(fixed_now):
    feed = ActivityFeedBuilder(FakeUnlockRepo([_request(1, fixed_now)]), FakeAttendanceRepo([]))
    dashboard = DashboardService(FakeAcademicsRepo(), feed).get_dashboard(now=fixed_now)

    data = dashboard.to_dict()
    assert data["total_teachers"] == 4
    assert data["total_students"] == 120
    assert data["total_classes"] == 6
    assert data["total_courses"] == 18
    assert data["recent_activities"] == [
        {
            "description": "Unlock request pending for Ms. Rao",
            "time_ago": "Just now",
            "icon": "bi-lock",
            "type": "warning",
            "timestamp": fixed_now.isoformat(),
        }
    ]
