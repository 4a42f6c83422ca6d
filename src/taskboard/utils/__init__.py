"""Utility functions."""

from .datetime import end_of_day, from_iso, now_local, to_iso
from .task import humanize_due_date, is_task_expired, is_task_expiring_today

__all__ = [
    "end_of_day",
    "from_iso",
    "humanize_due_date",
    "is_task_expired",
    "is_task_expiring_today",
    "now_local",
    "to_iso",
]
