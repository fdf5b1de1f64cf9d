from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles stored in the session by the auth layer."""

    ADMIN = "admin"
    TEACHER = "teacher"


class UnlockStatus(str, Enum):
    """Lifecycle of a teacher's unlock request. APPROVED/REJECTED are terminal."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class AttendanceMark(str, Enum):
    """Known values of the attendance status column.

    The column itself is free text; compare with ``is_present`` rather than
    converting stored values to this enum.
    """

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"


def is_present(status: object) -> bool:
    if status is None:
        return False
    value = status.value if isinstance(status, Enum) else str(status)
    return value.strip().upper() == AttendanceMark.PRESENT.value
