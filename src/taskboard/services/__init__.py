"""Service layer for business logic."""

from .filter_service import FilterService, filter_tasks, sort_tasks

__all__ = [
    "FilterService",
    "filter_tasks",
    "sort_tasks",
]
