from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.enums import UnlockStatus
from ..core.exceptions import InvalidTransitionError, NotFoundError
from ..database.unit_of_work import UnitOfWork
from .model import UnlockRequest, UnlockStats
from .repository import UnlockRequestRepository

logger = logging.getLogger(__name__)


class UnlockRequestService:
    """Admin side of the unlock workflow.

    PENDING -> APPROVED | REJECTED. Approving reopens every attendance row of
    the request's (course, date) session; both writes share one unit of work.
    """

    def __init__(self, requests: UnlockRequestRepository, attendance: AttendanceRepository, uow: UnitOfWork):
        self._requests = requests
        self._attendance = attendance
        self._uow = uow

    def list_all(self) -> Sequence[UnlockRequest]:
        return list(self._requests.list_all_desc())

    def list_pending(self) -> Sequence[UnlockRequest]:
        return list(self._requests.list_by_status(UnlockStatus.PENDING))

    def stats(self) -> UnlockStats:
        pending = self._requests.count_by_status(UnlockStatus.PENDING)
        approved = self._requests.count_by_status(UnlockStatus.APPROVED)
        rejected = self._requests.count_by_status(UnlockStatus.REJECTED)
        return UnlockStats(
            total=pending + approved + rejected,
            pending=pending,
            approved=approved,
            rejected=rejected,
        )

    def process(
        self,
        request_id: int,
        approve: bool,
        *,
        admin_user_id: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> UnlockRequest:
        """Approve or reject a pending request.

        ``admin_user_id`` is only recorded for tracking; ``None`` is accepted.
        Raises NotFoundError for an unknown id and InvalidTransitionError when
        the request has already been decided. Neither case writes anything.
        """
        now = now or now_local()
        new_status = UnlockStatus.APPROVED if approve else UnlockStatus.REJECTED

        with self._uow.atomic() as tx:
            req = self._requests.get_by_id(int(request_id), tx=tx, for_update=True)
            if req is None:
                logger.warning("Unlock request %s not found", request_id)
                raise NotFoundError("Unlock request not found")
            if req.status != UnlockStatus.PENDING:
                logger.warning(
                    "Unlock request %s already %s; refusing %s",
                    request_id,
                    req.status.value,
                    new_status.value,
                )
                raise InvalidTransitionError(f"Unlock request already {req.status.value.lower()}")

            updated = replace(req, status=new_status, processed_by=admin_user_id, processed_at=now)

            unlocked = 0
            if approve:
                records = self._attendance.list_for_course_and_date(
                    course_id=req.course_id,
                    session_date=req.request_date,
                    tx=tx,
                )
                reopened = [replace(r, is_locked=False, unlock_approved_by=admin_user_id) for r in records]
                self._attendance.save_all(reopened, tx=tx)
                unlocked = len(reopened)

            saved = self._requests.save(updated, tx=tx)

        logger.info(
            "Unlock request %s %s by admin=%s (attendance rows unlocked=%d)",
            saved.request_id,
            saved.status.value.lower(),
            admin_user_id,
            unlocked,
        )
        return saved
