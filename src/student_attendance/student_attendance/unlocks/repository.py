from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import UnlockStatus
from ..database.unit_of_work import Transaction
from .model import UnlockRequest


class UnlockRequestRepository(Protocol):
    """Data access for unlock requests.

    Reads are joined with teacher and course names where those exist.
    """

    def list_all_desc(self) -> Sequence[UnlockRequest]:
        """All requests, newest ``created_at`` first."""

        raise NotImplementedError

    def list_by_status(self, status: UnlockStatus) -> Sequence[UnlockRequest]:
        raise NotImplementedError

    def count_by_status(self, status: UnlockStatus) -> int:
        raise NotImplementedError

    def get_by_id(
        self,
        request_id: int,
        *,
        tx: Optional[Transaction] = None,
        for_update: bool = False,
    ) -> Optional[UnlockRequest]:
        raise NotImplementedError

    def save(self, request: UnlockRequest, *, tx: Optional[Transaction] = None) -> UnlockRequest:
        """Persist status and processing fields of an existing request."""

        raise NotImplementedError
