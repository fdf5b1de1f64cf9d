from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import UnlockStatus


@dataclass(frozen=True)
class UnlockRequest:
    """A teacher's request to reopen the locked attendance of one course session."""

    request_id: int
    teacher_id: Optional[int]
    course_id: int
    request_date: date
    status: UnlockStatus
    created_at: datetime
    reason: Optional[str] = None
    processed_by: Optional[int] = None
    processed_at: Optional[datetime] = None
    # Filled by joins on read; never written back.
    teacher_name: Optional[str] = None
    course_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "teacher_id": self.teacher_id,
            "teacher_name": self.teacher_name,
            "course_id": self.course_id,
            "course_name": self.course_name,
            "request_date": self.request_date.isoformat(),
            "reason": self.reason,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "processed_by": self.processed_by,
            "processed_at": self.processed_at.isoformat() if self.processed_at else None,
        }


@dataclass(frozen=True)
class UnlockStats:
    total: int
    pending: int
    approved: int
    rejected: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "pending": self.pending,
            "approved": self.approved,
            "rejected": self.rejected,
        }
