"""Filtering and sorting of the visible task set."""

from collections.abc import Callable, Iterable
from datetime import datetime

from ..models import FilterType, SortType, Task
from ..utils import end_of_day, now_local

Predicate = Callable[[Task, datetime], bool]


def _is_overdue(task: Task, day_end: datetime) -> bool:
    return task.due_date is not None and task.due_date < day_end


def _is_today(task: Task, day_end: datetime) -> bool:
    return task.due_date is not None and task.due_date == day_end


# Every predicate receives the end of the current day, computed once per pass.
PREDICATES: dict[FilterType, Predicate] = {
    FilterType.ALL: lambda task, _: not task.is_archive,
    FilterType.OVERDUE: lambda task, day_end: _is_overdue(task, day_end) and not task.is_archive,
    FilterType.TODAY: lambda task, day_end: _is_today(task, day_end) and not task.is_archive,
    FilterType.FAVORITES: lambda task, _: task.is_favorite and not task.is_archive,
    FilterType.REPEATING: lambda task, _: task.is_repeating and not task.is_archive,
    FilterType.ARCHIVE: lambda task, _: task.is_archive,
}


def filter_tasks(
    tasks: Iterable[Task], filter_type: FilterType, now: datetime | None = None
) -> list[Task]:
    """Keep the tasks matching a filter category, in their original order."""
    day_end = end_of_day(now or now_local())
    predicate = PREDICATES[filter_type]
    return [task for task in tasks if predicate(task, day_end)]


def _date_up_key(task: Task) -> tuple[int, float]:
    if task.due_date is None:
        return (1, 0.0)
    return (0, task.due_date.timestamp())


def _date_down_key(task: Task) -> tuple[int, float]:
    if task.due_date is None:
        return (1, 0.0)
    return (0, -task.due_date.timestamp())


def sort_tasks(tasks: Iterable[Task], sort_type: SortType) -> list[Task]:
    """
    Order tasks for display.

    Tasks without a due date go last in both date modes. The sort is
    stable, so equal dates keep their filtered order.
    """
    if sort_type == SortType.DATE_UP:
        return sorted(tasks, key=_date_up_key)
    if sort_type == SortType.DATE_DOWN:
        return sorted(tasks, key=_date_down_key)
    return list(tasks)


class FilterService:
    """Service for deriving the visible task sequence."""

    def apply(
        self,
        tasks: list[Task],
        filter_type: FilterType,
        sort_type: SortType = SortType.DEFAULT,
        now: datetime | None = None,
    ) -> list[Task]:
        """Filter, then sort."""
        return sort_tasks(filter_tasks(tasks, filter_type, now), sort_type)

    def count(self, tasks: list[Task], now: datetime | None = None) -> dict[FilterType, int]:
        """Number of matching tasks per filter category."""
        now = now or now_local()
        return {
            filter_type: len(filter_tasks(tasks, filter_type, now)) for filter_type in FilterType
        }
