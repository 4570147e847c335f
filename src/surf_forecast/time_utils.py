"""Time helpers for building upstream requests."""

from datetime import datetime, timedelta, timezone
from typing import Optional


def get_unix_time_for_future_day(days: int, now: Optional[datetime] = None) -> int:
    """Return the unix timestamp ``days`` days after ``now`` (default: current UTC time)."""
    now = now or datetime.now(timezone.utc)
    return int((now + timedelta(days=days)).timestamp())
