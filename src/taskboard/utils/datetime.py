"""Utilities for datetime handling."""

from datetime import datetime, timezone


def now_local() -> datetime:
    """Get current local datetime (timezone-aware)."""
    return datetime.now().astimezone()


def _has_local_offset(moment: datetime) -> bool:
    return isinstance(moment.tzinfo, timezone) and (
        moment.utcoffset() == moment.astimezone().utcoffset()
    )


def end_of_day(moment: datetime) -> datetime:
    """Last millisecond of the calendar day of ``moment``, in its timezone.

    Local fixed offsets (as returned by ``astimezone()``) are resolved again
    at the end of the day, so a daylight saving change earlier that day
    moves the result to the new offset.
    """
    day_end = moment.replace(hour=23, minute=59, second=59, microsecond=999000)
    if _has_local_offset(moment):
        return day_end.replace(tzinfo=None).astimezone()
    return day_end


def to_iso(dt: datetime) -> str:
    """Convert datetime to ISO format string."""
    return dt.isoformat()


def from_iso(value: str) -> datetime:
    """Parse ISO format string to datetime."""
    # Handle both 'Z' suffix and explicit timezone
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
