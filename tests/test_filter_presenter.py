"""Tests for FilterPresenter."""

import pytest

from taskboard.models import FilterType, UpdateType
from taskboard.presenters import FilterPresenter
from taskboard.ui.widgets import AbstractView

from .fakes import make_task


@pytest.fixture
def container() -> AbstractView:
    return AbstractView()


@pytest.fixture
def presenter(container, context):
    presenter = FilterPresenter(container, context)
    presenter.init()
    yield presenter
    presenter.destroy()


class TestFilterPresenter:
    """Tests for the filter bar."""

    def test_renders_counts(self, presenter, context, container, renderer):
        """The bar shows a count per category."""
        context.tasks_model.set_tasks(
            UpdateType.INIT,
            [make_task("1", due_in_days=-1), make_task("2", is_archive=True)],
        )

        view = presenter.filter_view
        assert renderer.children_of(container) == [view]
        assert view.counts[FilterType.ALL] == 1
        assert view.counts[FilterType.OVERDUE] == 1
        assert view.counts[FilterType.ARCHIVE] == 1
        assert view.current_filter == FilterType.ALL

    def test_click_changes_filter(self, presenter, context):
        """A filter button sets the filter with a MAJOR update."""
        events = []
        context.filter_model.subscribe(lambda *event: events.append(event))

        presenter.filter_view.on_button("filter-favorites")

        assert context.filter_model.get_filter() == FilterType.FAVORITES
        assert events == [(UpdateType.MAJOR, FilterType.FAVORITES)]
        assert presenter.filter_view.current_filter == FilterType.FAVORITES

    def test_same_filter_ignored(self, presenter, context):
        """Clicking the active filter does nothing."""
        events = []
        context.filter_model.subscribe(lambda *event: events.append(event))

        presenter.filter_view.on_button("filter-all")

        assert events == []

    def test_destroy(self, presenter, context, container, renderer):
        """destroy() unsubscribes and removes the bar."""
        presenter.destroy()

        assert context.tasks_model.subscriber_count == 0
        assert context.filter_model.subscriber_count == 0
        assert renderer.children_of(container) == []
