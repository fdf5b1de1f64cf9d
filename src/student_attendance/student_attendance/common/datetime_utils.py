from __future__ import annotations

from datetime import datetime
from typing import Optional


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_time_ago(ts: Optional[datetime], *, now: Optional[datetime] = None) -> str:
    """Relative label for a past timestamp ("5 mins ago", "2 days ago").

    Buckets are floored, never rounded. Missing and future timestamps read
    as "Just now".
    """
    if ts is None:
        return "Just now"

    now = now or now_local()
    minutes = int((now - ts).total_seconds() // 60)

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes} mins ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hours ago"
    days = hours // 24
    return f"{days} days ago"
