from __future__ import annotations

from typing import Protocol


class AcademicsRepository(Protocol):
    """Read-only counters behind the admin dashboard tiles."""

    def count_active_teachers(self) -> int:
        raise NotImplementedError

    def count_active_students(self) -> int:
        raise NotImplementedError

    def count_classes(self) -> int:
        raise NotImplementedError

    def count_courses(self) -> int:
        raise NotImplementedError
