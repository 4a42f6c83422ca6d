"""Date predicates and formatting for task cards and filters."""

from __future__ import annotations

from datetime import datetime

from .datetime import end_of_day, now_local


def is_task_expired(due_date: datetime | None, now: datetime | None = None) -> bool:
    """Check if a due date lies before the end of the current day."""
    if due_date is None:
        return False
    current = end_of_day(now or now_local())
    return due_date < current


def is_task_expiring_today(due_date: datetime | None, now: datetime | None = None) -> bool:
    """Check if a due date is exactly the end of the current day."""
    if due_date is None:
        return False
    current = end_of_day(now or now_local())
    return due_date == current


def humanize_due_date(due_date: datetime) -> str:
    """Format a due date as e.g. '7 March'."""
    return f"{due_date.day} {due_date.strftime('%B')}"
