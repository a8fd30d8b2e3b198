"""Date manipulation utilities"""

from datetime import date, datetime, time, timezone
from typing import Optional

SECONDS_PER_DAY = 86_400


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


def to_utc_midnight(value) -> Optional[datetime]:
    """
    Coerce a calendar date (or ISO date string) to midnight UTC.

    Returns None when the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value)
        except ValueError:
            return None
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return None


def days_until(target, now: datetime) -> Optional[float]:
    """Fractional days from `now` to `target`; negative once `target` has passed"""
    target_dt = to_utc_midnight(target)
    if target_dt is None:
        return None
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return (target_dt - now).total_seconds() / SECONDS_PER_DAY
