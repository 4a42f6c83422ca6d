"""Tests for filtering and sorting of the visible task set."""

import time
from datetime import datetime, timedelta

import pytest

from taskboard.models import FilterType, SortType
from taskboard.services import FilterService, filter_tasks, sort_tasks
from taskboard.ui.widgets import TaskEditView
from taskboard.utils import end_of_day, is_task_expired, is_task_expiring_today

from .fakes import NOW, TODAY, make_task, weekly


@pytest.fixture
def filter_service() -> FilterService:
    """Create a FilterService instance."""
    return FilterService()


@pytest.fixture
def tasks():
    """One task per interesting category."""
    return [
        make_task("plain"),
        make_task("yesterday", due_in_days=-1),
        make_task("today", due_in_days=0),
        make_task("tomorrow", due_in_days=1),
        make_task("favorite", is_favorite=True),
        make_task("weekly", repeating=weekly("mo", "th")),
        make_task("archived", due_in_days=-3, is_archive=True, is_favorite=True),
    ]


def ids(tasks):
    return [task.id for task in tasks]


class TestFilterTasks:
    """Tests for filter categories."""

    def test_all_excludes_archived(self, tasks):
        """ALL is every task that is not archived."""
        assert ids(filter_tasks(tasks, FilterType.ALL, NOW)) == [
            "plain",
            "yesterday",
            "today",
            "tomorrow",
            "favorite",
            "weekly",
        ]

    def test_overdue(self, tasks):
        """OVERDUE is a due date before the end of today."""
        assert ids(filter_tasks(tasks, FilterType.OVERDUE, NOW)) == ["yesterday"]

    def test_today(self, tasks):
        """TODAY is a due date exactly at the end of today."""
        assert ids(filter_tasks(tasks, FilterType.TODAY, NOW)) == ["today"]

    def test_earlier_time_today_is_overdue(self):
        """A due time earlier today counts as overdue, not today."""
        morning = make_task("morning").model_copy(
            update={"due_date": TODAY - timedelta(hours=12)}
        )
        assert ids(filter_tasks([morning], FilterType.OVERDUE, NOW)) == ["morning"]
        assert filter_tasks([morning], FilterType.TODAY, NOW) == []

    def test_favorites(self, tasks):
        """FAVORITES skips archived favorites."""
        assert ids(filter_tasks(tasks, FilterType.FAVORITES, NOW)) == ["favorite"]

    def test_repeating(self, tasks):
        """REPEATING is any weekday set."""
        assert ids(filter_tasks(tasks, FilterType.REPEATING, NOW)) == ["weekly"]

    def test_archive(self, tasks):
        """ARCHIVE is only archived tasks."""
        assert ids(filter_tasks(tasks, FilterType.ARCHIVE, NOW)) == ["archived"]

    @pytest.mark.parametrize("filter_type", list(FilterType))
    def test_partitions_input(self, tasks, filter_type):
        """Every task is either kept or dropped, in original order."""
        kept = filter_tasks(tasks, filter_type, NOW)
        dropped = [task for task in tasks if task not in kept]
        assert len(kept) + len(dropped) == len(tasks)
        assert kept == [task for task in tasks if task in kept]

    @pytest.mark.parametrize("filter_type", list(FilterType))
    def test_idempotent(self, tasks, filter_type):
        """Filtering twice changes nothing."""
        once = filter_tasks(tasks, filter_type, NOW)
        assert filter_tasks(once, filter_type, NOW) == once

    def test_empty_input(self):
        """No tasks in, no tasks out."""
        assert filter_tasks([], FilterType.OVERDUE, NOW) == []


class TestSortTasks:
    """Tests for sort modes."""

    def test_default_keeps_order(self, tasks):
        """DEFAULT is the filtered order."""
        assert sort_tasks(tasks, SortType.DEFAULT) == tasks

    def test_date_up(self):
        """DATE_UP puts the earliest due date first."""
        tasks = [make_task("b", due_in_days=2), make_task("a", due_in_days=-1)]
        assert ids(sort_tasks(tasks, SortType.DATE_UP)) == ["a", "b"]

    def test_date_down(self):
        """DATE_DOWN puts the latest due date first."""
        tasks = [make_task("a", due_in_days=-1), make_task("b", due_in_days=2)]
        assert ids(sort_tasks(tasks, SortType.DATE_DOWN)) == ["b", "a"]

    def test_undated_last_in_both_directions(self):
        """Tasks without a due date sort after dated ones."""
        tasks = [make_task("1"), make_task("2", due_in_days=0)]
        assert ids(sort_tasks(tasks, SortType.DATE_UP)) == ["2", "1"]
        assert ids(sort_tasks(tasks, SortType.DATE_DOWN)) == ["2", "1"]

    def test_equal_dates_keep_order(self):
        """The sort is stable for equal dates."""
        tasks = [
            make_task("x", due_in_days=1),
            make_task("y", due_in_days=1),
            make_task("z", due_in_days=0),
        ]
        assert ids(sort_tasks(tasks, SortType.DATE_UP)) == ["z", "x", "y"]
        assert ids(sort_tasks(tasks, SortType.DATE_DOWN)) == ["x", "y", "z"]

    def test_directions_reverse_each_other_for_distinct_dates(self):
        """With distinct dates, DATE_DOWN is DATE_UP reversed."""
        tasks = [make_task(str(day), due_in_days=day) for day in (3, -2, 0, 5, 1)]
        up = sort_tasks(tasks, SortType.DATE_UP)
        assert sort_tasks(tasks, SortType.DATE_DOWN) == list(reversed(up))

    @pytest.mark.parametrize("sort_type", list(SortType))
    def test_idempotent(self, tasks, sort_type):
        """Sorting a sorted list changes nothing."""
        once = sort_tasks(tasks, sort_type)
        assert sort_tasks(once, sort_type) == once


class TestFilterService:
    """Tests for FilterService."""

    def test_apply_filters_then_sorts(self, filter_service, tasks):
        """apply() narrows by category, then orders."""
        result = filter_service.apply(tasks, FilterType.ALL, SortType.DATE_UP, now=NOW)
        assert ids(result)[:3] == ["yesterday", "today", "tomorrow"]
        assert "archived" not in ids(result)

    def test_count(self, filter_service, tasks):
        """count() reports every category."""
        counts = filter_service.count(tasks, now=NOW)
        assert counts == {
            FilterType.ALL: 6,
            FilterType.OVERDUE: 1,
            FilterType.TODAY: 1,
            FilterType.FAVORITES: 1,
            FilterType.REPEATING: 1,
            FilterType.ARCHIVE: 1,
        }


class TestDatePredicates:
    """Tests for due date helpers."""

    def test_no_due_date(self):
        """Undated tasks are neither expired nor due today."""
        assert is_task_expired(None, NOW) is False
        assert is_task_expiring_today(None, NOW) is False

    def test_expired(self):
        """Yesterday's end of day is expired."""
        assert is_task_expired(TODAY - timedelta(days=1), NOW) is True
        assert is_task_expired(TODAY, NOW) is False

    def test_expiring_today(self):
        """Only the exact end of today is 'today'."""
        assert is_task_expiring_today(TODAY, NOW) is True
        assert is_task_expiring_today(TODAY + timedelta(days=1), NOW) is False


@pytest.fixture
def berlin_time(monkeypatch):
    """Switch the process local time zone to Europe/Berlin."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available")
    monkeypatch.setenv("TZ", "Europe/Berlin")
    time.tzset()
    if datetime(2026, 7, 1).astimezone().utcoffset() != timedelta(hours=2):
        monkeypatch.undo()
        time.tzset()
        pytest.skip("Europe/Berlin zone data is not installed")
    yield
    monkeypatch.undo()
    time.tzset()


class TestDaylightSavingChange:
    """Tests for the day clocks go back (2026-10-25 in Berlin)."""

    def test_end_of_day_uses_evening_offset(self, berlin_time):
        """Local midnight is +02:00, the end of that day is +01:00."""
        midnight = datetime(2026, 10, 25).astimezone()
        assert midnight.utcoffset() == timedelta(hours=2)

        assert end_of_day(midnight).utcoffset() == timedelta(hours=1)

    def test_form_date_is_today(self, berlin_time):
        """A task due today from the form is TODAY, not OVERDUE."""
        now = datetime(2026, 10, 25, 12, 0).astimezone()
        form = TaskEditView()
        form.on_input("description", "Change clocks")
        form.toggle_due_date()
        form.on_input("due-date", "2026-10-25")
        task = make_task("1").model_copy(update={"due_date": form.get_draft().due_date})

        assert ids(filter_tasks([task], FilterType.TODAY, now)) == ["1"]
        assert filter_tasks([task], FilterType.OVERDUE, now) == []
