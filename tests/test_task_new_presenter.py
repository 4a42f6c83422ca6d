"""Tests for TaskNewPresenter."""

from unittest.mock import MagicMock

import pytest

from taskboard.models import TaskDraft, TaskViewState, UpdateType, UserAction
from taskboard.presenters import TaskNewPresenter, TaskPresenter
from taskboard.ui.widgets import TaskListView

from .fakes import make_task


@pytest.fixture
def change_data() -> MagicMock:
    return MagicMock()


@pytest.fixture
def container() -> TaskListView:
    return TaskListView()


@pytest.fixture
def presenter(container, change_data, context) -> TaskNewPresenter:
    return TaskNewPresenter(container, change_data, context)


class TestOpenAndClose:
    """Tests for the form lifecycle."""

    def test_init_renders_form_at_top(self, presenter, container, renderer, context):
        """The form goes above existing rows."""
        row = TaskPresenter(container, MagicMock(), context)
        row.init(make_task("1"))

        presenter.init()

        assert presenter.is_open is True
        assert presenter.state == TaskViewState.EDITING
        assert renderer.children_of(container) == [presenter.edit_view, row.card_view]

    def test_second_init_is_noop(self, presenter, container, renderer):
        """Only one creation form at a time."""
        presenter.init()
        form = presenter.edit_view

        presenter.init()

        assert presenter.edit_view is form
        assert renderer.children_of(container) == [form]

    def test_escape_closes_without_network(self, presenter, container, renderer, change_data):
        """Cancelling the form never calls the server."""
        on_close = MagicMock()
        presenter.init(on_close)

        presenter.edit_view.on_key("escape")

        assert presenter.is_open is False
        assert renderer.children_of(container) == []
        on_close.assert_called_once_with()
        change_data.assert_not_called()

    def test_cancel_button(self, presenter, change_data):
        """The delete button on a new form just discards it."""
        presenter.init()

        presenter.edit_view.on_button("delete")

        assert presenter.is_open is False
        change_data.assert_not_called()

    def test_destroy_is_idempotent(self, presenter):
        """on_close runs once however often destroy is called."""
        on_close = MagicMock()
        presenter.init(on_close)

        presenter.destroy()
        presenter.destroy()

        on_close.assert_called_once_with()

    def test_item_editor_closes_new_form(self, presenter, container, change_data, context):
        """Opening an existing task's form dismisses the creation form."""
        row = TaskPresenter(container, change_data, context)
        row.init(make_task("1"))
        presenter.init()

        row.card_view.on_button("edit")

        assert presenter.is_open is False
        assert row.state == TaskViewState.EDITING

    def test_new_form_closes_item_editor(self, presenter, container, change_data, context):
        """Opening the creation form closes an open item form."""
        row = TaskPresenter(container, change_data, context)
        row.init(make_task("1"))
        row.card_view.on_button("edit")

        presenter.init()

        assert row.state == TaskViewState.NORMAL
        assert context.active_editor.current is presenter


class TestSubmit:
    """Tests for submitting the form."""

    def test_submit_sends_draft(self, presenter, change_data):
        """A valid form is sent as an ADD_TASK with MINOR update."""
        presenter.init()
        presenter.edit_view.on_input("description", "Water plants")

        presenter.edit_view.on_button("save")

        change_data.assert_called_once_with(
            UserAction.ADD_TASK, UpdateType.MINOR, TaskDraft(description="Water plants")
        )

    def test_empty_description_rejected(self, presenter, change_data):
        """A blank form is not sent."""
        presenter.init()

        presenter.edit_view.on_button("save")

        change_data.assert_not_called()
        assert presenter.edit_view.data["error"] == "Description is required"


class TestViewState:
    """Tests for saving and aborting."""

    def test_saving(self, presenter):
        """set_saving locks the form."""
        presenter.init()

        presenter.set_saving()

        assert presenter.state == TaskViewState.SAVING
        assert presenter.edit_view.data["is_disabled"] is True
        assert presenter.edit_view.data["is_saving"] is True

    def test_aborting_returns_to_editing(self, presenter, timers):
        """A failed create shakes the form, then unlocks it."""
        presenter.init()
        presenter.set_saving()

        presenter.set_aborting()

        assert presenter.state == TaskViewState.ABORTING
        assert presenter.edit_view.data["is_disabled"] is False
        assert presenter.edit_view.data["is_aborting"] is True

        timers.fire_all()

        assert presenter.state == TaskViewState.EDITING
        assert presenter.edit_view.data["is_aborting"] is False

    def test_resubmit_while_aborting(self, presenter, timers):
        """A new save replaces the pending revert of the previous failure."""
        presenter.init()
        presenter.set_saving()
        presenter.set_aborting()
        first_timer = timers.timers[0]

        presenter.set_saving()

        assert first_timer.cancelled is True
        assert presenter.edit_view.data["is_aborting"] is False

        presenter.set_aborting()

        assert presenter.state == TaskViewState.ABORTING
        assert len(timers.pending) == 1
        assert timers.pending[0] is not first_timer

        timers.fire_all()

        assert presenter.state == TaskViewState.EDITING

    def test_aborting_after_close(self, presenter, timers):
        """A failure for a closed form is ignored."""
        presenter.set_aborting()

        assert presenter.is_open is False
        assert timers.pending == []

    def test_destroy_cancels_revert(self, presenter, timers):
        """Closing the form cancels the pending revert."""
        presenter.init()
        presenter.set_saving()
        presenter.set_aborting()

        presenter.destroy()

        assert timers.pending == []
        assert presenter.state == TaskViewState.NORMAL
