"""Presenter for the "new task" form."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..models import TaskValidationError, TaskViewState, UpdateType, UserAction
from ..ui.render import Container, RenderPosition
from ..ui.widgets.task_edit import TaskEditView
from .task import ChangeData

if TYPE_CHECKING:
    from ..context import BoardContext, Cancellable

logger = logging.getLogger(__name__)


class TaskNewPresenter:
    """Composes a new task at the top of the list.

    One form at a time. It is dismissed on cancel, on successful
    creation (through the board re-render) or when another editor opens.
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

        self._task_edit_component: TaskEditView | None = None
        self._on_close: Callable[[], None] | None = None
        self._state = TaskViewState.NORMAL
        self._abort_timer: Cancellable | None = None

    @property
    def is_open(self) -> bool:
        return self._task_edit_component is not None

    @property
    def state(self) -> TaskViewState:
        return self._state

    @property
    def edit_view(self) -> TaskEditView | None:
        return self._task_edit_component

    def init(self, on_close: Callable[[], None] | None = None) -> None:
        """Open a blank form. ``on_close`` runs once when it goes away."""
        if self._task_edit_component is not None:
            return

        self._context.active_editor.open(self)
        self._on_close = on_close
        self._task_edit_component = TaskEditView()
        self._task_edit_component.set_form_submit_handler(self._handle_form_submit)
        self._task_edit_component.set_delete_click_handler(self.destroy)
        self._task_edit_component.set_escape_handler(self.destroy)

        self._renderer.render(self._container, self._task_edit_component, RenderPosition.AFTERBEGIN)
        self._state = TaskViewState.EDITING

    def destroy(self) -> None:
        """Discard the form without any network call. Safe to call twice."""
        if self._task_edit_component is None:
            return

        if self._abort_timer is not None:
            self._abort_timer.cancel()
            self._abort_timer = None
        self._context.active_editor.release(self)
        self._task_edit_component.clear_handlers()
        self._renderer.remove(self._task_edit_component)
        self._task_edit_component = None
        self._state = TaskViewState.NORMAL

        on_close, self._on_close = self._on_close, None
        if on_close is not None:
            on_close()

    def reset_view(self) -> None:
        self.destroy()

    def set_saving(self) -> None:
        if self._task_edit_component is None:
            return
        if self._abort_timer is not None:
            self._abort_timer.cancel()
            self._abort_timer = None
        self._state = TaskViewState.SAVING
        self._task_edit_component.update_data(is_disabled=True, is_saving=True, is_aborting=False)

    def set_aborting(self) -> None:
        if self._task_edit_component is None:
            logger.debug("New task form closed before the failure arrived")
            return
        self._state = TaskViewState.ABORTING
        self._task_edit_component.update_data(is_disabled=False, is_saving=False, is_aborting=True)
        self._abort_timer = self._context.call_later(
            self._context.abort_interval, self._finish_aborting
        )

    def _finish_aborting(self) -> None:
        self._abort_timer = None
        if self._task_edit_component is None or self._state != TaskViewState.ABORTING:
            return
        self._state = TaskViewState.EDITING
        self._task_edit_component.update_data(is_aborting=False)

    def _handle_form_submit(self) -> None:
        assert self._task_edit_component is not None
        try:
            draft = self._task_edit_component.get_draft()
        except TaskValidationError as e:
            logger.debug("Rejected new task: %s", e)
            self._task_edit_component.update_data(error=str(e))
            return
        self._change_data(UserAction.ADD_TASK, UpdateType.MINOR, draft)
