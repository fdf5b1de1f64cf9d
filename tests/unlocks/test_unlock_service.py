from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime

import pytest

from src.student_attendance.student_attendance.attendance.model import AttendanceRecord
from src.student_attendance.student_attendance.core.enums import UnlockStatus
from src.student_attendance.student_attendance.core.exceptions import InvalidTransitionError, NotFoundError
from src.student_attendance.student_attendance.unlocks.model import UnlockRequest
from src.student_attendance.student_attendance.unlocks.service import UnlockRequestService


class FakeUnitOfWork:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    @contextmanager
    def atomic(self):
        try:
            yield "tx"
        except Exception:
            self.rollbacks += 1
            raise
        self.commits += 1


class FakeUnlockRepo:
    def __init__(self, requests):
        self._by_id = {r.request_id: r for r in requests}
        self.saved = []
        self.lock_calls = []

    def list_all_desc(self):
        return sorted(self._by_id.values(), key=lambda r: r.created_at, reverse=True)

    def list_by_status(self, status):
        return [r for r in self.list_all_desc() if r.status == status]

    def count_by_status(self, status):
        return len(self.list_by_status(status))

    def get_by_id(self, request_id, *, tx=None, for_update=False):
        self.lock_calls.append((request_id, tx, for_update))
        return self._by_id.get(int(request_id))

    def save(self, request, *, tx=None):
        assert tx == "tx"
        self.saved.append(request)
        self._by_id[request.request_id] = request
        return request


class FakeAttendanceRepo:
    def __init__(self, records):
        self._by_id = {r.attendance_id: r for r in records}
        self.batches = []

    def list_for_course_and_date(self, *, course_id, session_date, tx=None):
        return [r for r in self._by_id.values() if r.course_id == course_id and r.date == session_date]

    def save_all(self, records, *, tx=None):
        assert tx == "tx"
        self.batches.append(list(records))
        for r in records:
            self._by_id[r.attendance_id] = r

    def get(self, attendance_id):
        return self._by_id[attendance_id]


def _request(request_id, *, status=UnlockStatus.PENDING, course_id=7, day=date(2026, 1, 30), created_at=None):
    return UnlockRequest(
        request_id=request_id,
        teacher_id=3,
        course_id=course_id,
        request_date=day,
        status=status,
        created_at=created_at or datetime(2026, 1, 31, 9, 0),
        teacher_name="Ms. Rao",
    )


def _record(attendance_id, *, course_id=7, day=date(2026, 1, 30), status="PRESENT"):
    return AttendanceRecord(
        attendance_id=attendance_id,
        student_id=100 + attendance_id,
        course_id=course_id,
        date=day,
        status=status,
        marked_at=datetime(2026, 1, 30, 10, 0),
        is_locked=True,
    )


def _records():
    return [
        _record(1),
        _record(2, status="ABSENT"),
        _record(3, course_id=8),
        _record(4, day=date(2026, 1, 29)),
    ]


def test_approve_unlocks_exactly_the_matching_session(fixed_now):
    requests = FakeUnlockRepo([_request(1)])
    attendance = FakeAttendanceRepo(_records())
    uow = FakeUnitOfWork()
    svc = UnlockRequestService(requests, attendance, uow)

    result = svc.process(1, True, admin_user_id=42, now=fixed_now)

    assert result.status == UnlockStatus.APPROVED
    assert result.processed_by == 42
    assert result.processed_at == fixed_now

    for attendance_id in (1, 2):
        rec = attendance.get(attendance_id)
        assert rec.is_locked is False
        assert rec.unlock_approved_by == 42
    for attendance_id in (3, 4):
        rec = attendance.get(attendance_id)
        assert rec.is_locked is True
        assert rec.unlock_approved_by is None

    assert len(attendance.batches) == 1
    assert uow.commits == 1
    assert requests.lock_calls == [(1, "tx", True)]


def test_approve_without_admin_identity_still_unlocks(fixed_now):
    attendance = FakeAttendanceRepo(_records())
    svc = UnlockRequestService(FakeUnlockRepo([_request(1)]), attendance, FakeUnitOfWork())

    result = svc.process(1, True, now=fixed_now)

    assert result.status == UnlockStatus.APPROVED
    assert attendance.get(1).is_locked is False
    assert attendance.get(1).unlock_approved_by is None


def test_reject_only_changes_request_status(fixed_now):
    requests = FakeUnlockRepo([_request(1)])
    attendance = FakeAttendanceRepo(_records())
    svc = UnlockRequestService(requests, attendance, FakeUnitOfWork())

    result = svc.process(1, False, admin_user_id=42, now=fixed_now)

    assert result.status == UnlockStatus.REJECTED
    assert attendance.batches == []
    assert all(attendance.get(i).is_locked for i in (1, 2, 3, 4))
    assert requests.saved == [result]


def test_unknown_request_raises_not_found_without_writes():
    requests = FakeUnlockRepo([_request(1)])
    attendance = FakeAttendanceRepo(_records())
    uow = FakeUnitOfWork()
    svc = UnlockRequestService(requests, attendance, uow)

    with pytest.raises(NotFoundError):
        svc.process(999, True, admin_user_id=1)

    assert requests.saved == []
    assert attendance.batches == []
    assert uow.rollbacks == 1
    assert uow.commits == 0


@pytest.mark.parametrize("terminal", [UnlockStatus.APPROVED, UnlockStatus.REJECTED])
@pytest.mark.parametrize("approve", [True, False])
def test_decided_request_cannot_transition_again(terminal, approve):
    requests = FakeUnlockRepo([_request(1, status=terminal)])
    attendance = FakeAttendanceRepo(_records())
    svc = UnlockRequestService(requests, attendance, FakeUnitOfWork())

    with pytest.raises(InvalidTransitionError):
        svc.process(1, approve, admin_user_id=1)

    assert requests.saved == []
    assert attendance.batches == []


def test_failed_status_write_rolls_back_the_batch(fixed_now):
    class FailingUnlockRepo(FakeUnlockRepo):
        def save(self, request, *, tx=None):
            raise RuntimeError("connection lost")

    uow = FakeUnitOfWork()
    svc = UnlockRequestService(FailingUnlockRepo([_request(1)]), FakeAttendanceRepo(_records()), uow)

    with pytest.raises(RuntimeError):
        svc.process(1, True, admin_user_id=1, now=fixed_now)

    assert uow.rollbacks == 1
    assert uow.commits == 0


def test_lists_and_stats():
    requests = FakeUnlockRepo(
        [
            _request(1, created_at=datetime(2026, 1, 1, 8, 0)),
            _request(2, status=UnlockStatus.APPROVED, created_at=datetime(2026, 1, 3, 8, 0)),
            _request(3, status=UnlockStatus.REJECTED, created_at=datetime(2026, 1, 2, 8, 0)),
            _request(4, created_at=datetime(2026, 1, 4, 8, 0)),
        ]
    )
    svc = UnlockRequestService(requests, FakeAttendanceRepo([]), FakeUnitOfWork())

    assert [r.request_id for r in svc.list_all()] == [4, 2, 3, 1]
    assert [r.request_id for r in svc.list_pending()] == [4, 1]

    stats = svc.stats()
    assert (stats.total, stats.pending, stats.approved, stats.rejected) == (4, 2, 1, 1)


def test_stats_on_empty_store():
    svc = UnlockRequestService(FakeUnlockRepo([]), FakeAttendanceRepo([]), FakeUnitOfWork())
    stats = svc.stats()
    assert stats.to_dict() == {"total": 0, "pending": 0, "approved": 0, "rejected": 0}


def test_processed_request_serializes_for_api(fixed_now):
    svc = UnlockRequestService(FakeUnlockRepo([_request(1)]), FakeAttendanceRepo([]), FakeUnitOfWork())
    data = svc.process(1, True, admin_user_id=5, now=fixed_now).to_dict()

    assert data["status"] == "APPROVED"
    assert data["request_date"] == "2026-01-30"
    assert data["processed_at"] == fixed_now.isoformat()
    assert data["teacher_name"] == "Ms. Rao"


def test_original_request_object_is_not_mutated(fixed_now):
    original = _request(1)
    svc = UnlockRequestService(FakeUnlockRepo([original]), FakeAttendanceRepo([]), FakeUnitOfWork())

    svc.process(1, False, now=fixed_now)

    assert original.status == UnlockStatus.PENDING
