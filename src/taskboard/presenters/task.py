"""Presenter for one task in the list."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..models import Task, TaskValidationError, TaskViewState, UpdateType, UserAction
from ..ui.render import Container, RenderPosition
from ..ui.widgets.task_card import TaskView
from ..ui.widgets.task_edit import TaskEditView

if TYPE_CHECKING:
    from ..context import BoardContext, Cancellable

logger = logging.getLogger(__name__)

ChangeData = Callable[[UserAction, UpdateType, Any], Any]

_BUSY_STATES = (TaskViewState.SAVING, TaskViewState.DELETING)


class TaskPresenter:
    """Binds one task to its card and edit form.

    ``mode`` tells which view is shown (NORMAL card or EDITING form);
    a busy state (SAVING, DELETING, ABORTING) overlays it while an
    action is in flight or has just failed.
    """

    def __init__(
        self,
        task_list_container: Container,
        change_data: ChangeData,
        context: BoardContext,
    ) -> None:
        self._container = task_list_container
        self._change_data = change_data
        self._context = context
        self._renderer = context.renderer

        self._task: Task | None = None
        self._task_component: TaskView | None = None
        self._task_edit_component: TaskEditView | None = None
        self._mode = TaskViewState.NORMAL
        self._busy_state: TaskViewState | None = None
        self._abort_timer: Cancellable | None = None
        self._is_destroyed = False

    @property
    def task(self) -> Task | None:
        return self._task

    @property
    def state(self) -> TaskViewState:
        return self._busy_state or self._mode

    @property
    def card_view(self) -> TaskView | None:
        return self._task_component

    @property
    def edit_view(self) -> TaskEditView | None:
        return self._task_edit_component

    @property
    def is_destroyed(self) -> bool:
        return self._is_destroyed

    def init(self, task: Task) -> None:
        """Bind to ``task`` and (re)render. An open form is closed."""
        self._task = task
        self._cancel_abort_timer()
        self._busy_state = None

        prev_task_component = self._task_component
        prev_task_edit_component = self._task_edit_component

        self._task_component = TaskView(task, now=self._context.clock())
        self._task_component.set_edit_click_handler(self._handle_edit_click)
        self._task_component.set_favorite_click_handler(self._handle_favorite_click)
        self._task_component.set_archive_click_handler(self._handle_archive_click)

        self._task_edit_component = TaskEditView(task)
        self._task_edit_component.set_form_submit_handler(self._handle_form_submit)
        self._task_edit_component.set_delete_click_handler(self._handle_delete_click)
        self._task_edit_component.set_escape_handler(self.reset_view)

        if prev_task_component is None or prev_task_edit_component is None:
            self._renderer.render(self._container, self._task_component, RenderPosition.BEFOREEND)
            return

        if self._mode == TaskViewState.NORMAL:
            self._renderer.replace(self._task_component, prev_task_component)
        else:
            self._renderer.replace(self._task_component, prev_task_edit_component)
            self._context.active_editor.release(self)
            self._mode = TaskViewState.NORMAL

        for view in (prev_task_component, prev_task_edit_component):
            view.clear_handlers()
            self._renderer.remove(view)

    def destroy(self) -> None:
        """Remove views and drop every binding. Safe to call twice."""
        if self._is_destroyed:
            return
        self._is_destroyed = True
        self._cancel_abort_timer()
        self._context.active_editor.release(self)
        for view in (self._task_component, self._task_edit_component):
            if view is not None:
                view.clear_handlers()
                self._renderer.remove(view)
        self._task_component = None
        self._task_edit_component = None

    def reset_view(self) -> None:
        """Close the form, discarding the draft."""
        if self._mode != TaskViewState.NORMAL:
            self._replace_form_to_card()

    def set_view_state(self, state: TaskViewState) -> None:
        """Show an action's progress or failure without touching the task."""
        if self._is_destroyed:
            return

        if state in _BUSY_STATES:
            self._cancel_abort_timer()
            self._busy_state = state
            self._set_controls(
                is_disabled=True,
                is_saving=state == TaskViewState.SAVING,
                is_deleting=state == TaskViewState.DELETING,
            )
        elif state == TaskViewState.ABORTING:
            if self._busy_state not in _BUSY_STATES:
                # The form was closed or rebuilt while the action was in flight
                self._set_controls(is_disabled=False)
                return
            self._busy_state = TaskViewState.ABORTING
            self._set_controls(is_disabled=False, is_aborting=True)
            self._abort_timer = self._context.call_later(
                self._context.abort_interval, self._finish_aborting
            )
        else:
            raise ValueError(f"Not a view state: {state}")

    def _finish_aborting(self) -> None:
        self._abort_timer = None
        if self._is_destroyed or self._busy_state != TaskViewState.ABORTING:
            return
        self._busy_state = None
        self._set_controls(is_disabled=False)

    def _set_controls(
        self,
        is_disabled: bool,
        is_saving: bool = False,
        is_deleting: bool = False,
        is_aborting: bool = False,
    ) -> None:
        if self._task_edit_component is not None:
            self._task_edit_component.update_data(
                is_disabled=is_disabled,
                is_saving=is_saving,
                is_deleting=is_deleting,
                is_aborting=is_aborting,
            )
        if self._task_component is not None:
            self._task_component.update_data(is_disabled=is_disabled, is_aborting=is_aborting)

    def _cancel_abort_timer(self) -> None:
        if self._abort_timer is not None:
            self._abort_timer.cancel()
            self._abort_timer = None

    def _replace_card_to_form(self) -> None:
        assert self._task_component is not None and self._task_edit_component is not None
        self._context.active_editor.open(self)
        self._renderer.replace(self._task_edit_component, self._task_component)
        self._mode = TaskViewState.EDITING

    def _replace_form_to_card(self) -> None:
        assert self._task is not None
        assert self._task_component is not None and self._task_edit_component is not None
        if self._busy_state == TaskViewState.ABORTING:
            self._cancel_abort_timer()
            self._busy_state = None
        self._task_edit_component.reset(self._task)
        self._renderer.replace(self._task_component, self._task_edit_component)
        self._context.active_editor.release(self)
        self._mode = TaskViewState.NORMAL

    def _handle_edit_click(self) -> None:
        if self._mode == TaskViewState.NORMAL and self._busy_state is None:
            self._replace_card_to_form()

    def _handle_favorite_click(self) -> None:
        assert self._task is not None
        update = self._task.model_copy(update={"is_favorite": not self._task.is_favorite})
        self._change_data(UserAction.UPDATE_TASK, UpdateType.MINOR, update)

    def _handle_archive_click(self) -> None:
        assert self._task is not None
        update = self._task.model_copy(update={"is_archive": not self._task.is_archive})
        self._change_data(UserAction.UPDATE_TASK, UpdateType.MINOR, update)

    def _handle_form_submit(self) -> None:
        assert self._task is not None and self._task_edit_component is not None
        try:
            draft = self._task_edit_component.get_draft()
        except TaskValidationError as e:
            logger.debug("Rejected edit of %s: %s", self._task.id, e)
            self._task_edit_component.update_data(error=str(e))
            return

        update = Task(id=self._task.id, **draft.model_dump())
        # Date or repeat changes can move the task between filters
        is_minor_update = (
            self._task.due_date != update.due_date
            or self._task.is_repeating != update.is_repeating
        )
        self._change_data(
            UserAction.UPDATE_TASK,
            UpdateType.MINOR if is_minor_update else UpdateType.PATCH,
            update,
        )

    def _handle_delete_click(self) -> None:
        assert self._task is not None
        self._change_data(UserAction.DELETE_TASK, UpdateType.MINOR, self._task)
