"""Board presenter: visible set, pagination and the action funnel."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..api import TaskApiError
from ..models import (
    FilterType,
    SortType,
    Task,
    TaskDraft,
    TaskNotFoundError,
    TaskViewState,
    UpdateType,
    UserAction,
)
from ..ui.render import Container, RenderPosition
from ..ui.widgets.board import (
    BoardView,
    LoadingView,
    LoadMoreButtonView,
    NoTaskView,
    SortView,
    TaskListView,
)
from .task import TaskPresenter
from .task_new import TaskNewPresenter

if TYPE_CHECKING:
    from ..context import BoardContext

logger = logging.getLogger(__name__)

# Busy-lock key for the creation form, which has no task id yet
NEW_TASK_KEY = "__new__"


class BoardPresenter:
    """Renders the task list and routes every user action to the server.

    Model notifications, not service responses, drive re-rendering:
    PATCH re-inits one row, MINOR rebuilds the list keeping sort and
    pagination, MAJOR rebuilds with both reset, INIT ends loading.
    """

    def __init__(self, board_container: Container, context: BoardContext) -> None:
        self._board_container = board_container
        self._context = context
        self._tasks_model = context.tasks_model
        self._filter_model = context.filter_model
        self._api = context.api
        self._renderer = context.renderer
        self._page_size = context.page_size

        self._rendered_task_count = self._page_size
        self._current_sort_type = SortType.DEFAULT
        self._task_presenters: dict[str, TaskPresenter] = {}
        self._pending: set[str] = set()
        self._running: set[asyncio.Task[None]] = set()
        self._subscriptions: list[tuple[Any, int]] = []
        self._is_loading = True

        self._sort_component: SortView | None = None
        self._load_more_button_component: LoadMoreButtonView | None = None
        self._no_task_component: NoTaskView | None = None

        self._board_component = BoardView()
        self._task_list_component = TaskListView()
        self._loading_component = LoadingView()

        self._task_new_presenter = TaskNewPresenter(
            self._task_list_component, self.dispatch_action, context
        )

    # Inspection

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def sort_type(self) -> SortType:
        return self._current_sort_type

    @property
    def rendered_task_count(self) -> int:
        """Number of task rows currently materialized."""
        return len(self._task_presenters)

    @property
    def task_presenters(self) -> dict[str, TaskPresenter]:
        return dict(self._task_presenters)

    @property
    def task_new_presenter(self) -> TaskNewPresenter:
        return self._task_new_presenter

    @property
    def has_load_more(self) -> bool:
        return self._load_more_button_component is not None

    @property
    def no_task_component(self) -> NoTaskView | None:
        return self._no_task_component

    @property
    def task_list_component(self) -> TaskListView:
        return self._task_list_component

    @property
    def board_component(self) -> BoardView:
        return self._board_component

    @property
    def loading_component(self) -> LoadingView:
        return self._loading_component

    def is_pending(self, key: str) -> bool:
        """True while an action for this task id (or NEW_TASK_KEY) is in flight."""
        return key in self._pending

    # Lifecycle

    def init(self) -> None:
        """Render containers, subscribe to the models and show the board."""
        self._renderer.render(self._board_container, self._board_component, RenderPosition.BEFOREEND)
        self._renderer.render(
            self._board_component, self._task_list_component, RenderPosition.BEFOREEND
        )

        if not self._subscriptions:
            self._subscriptions = [
                (self._tasks_model, self._tasks_model.subscribe(self._handle_model_event)),
                (self._filter_model, self._filter_model.subscribe(self._handle_model_event)),
            ]

        self._render_board()

    def destroy(self) -> None:
        """Unsubscribe and remove everything this board rendered."""
        self._clear_board(reset_rendered_task_count=True, reset_sort_type=True)

        self._renderer.remove(self._task_list_component)
        self._renderer.remove(self._board_component)

        for model, token in self._subscriptions:
            model.unsubscribe(token)
        self._subscriptions = []

    def create_task(self, on_close: Callable[[], None] | None = None) -> None:
        """Open the new task form, switching to the ALL filter first."""
        if self._is_loading:
            logger.debug("create_task ignored while loading")
            return
        if self._filter_model.get_filter() != FilterType.ALL:
            self._filter_model.set_filter(UpdateType.MAJOR, FilterType.ALL)
        self._task_new_presenter.init(on_close)

    def change_sort_mode(self, sort_type: SortType) -> None:
        if self._current_sort_type == sort_type:
            return

        logger.debug("Sort mode: %s -> %s", self._current_sort_type.value, sort_type.value)
        self._current_sort_type = sort_type
        self._clear_board(reset_rendered_task_count=True)
        self._render_board()

    def load_more(self) -> None:
        tasks = self._get_tasks()
        task_count = len(tasks)
        start = min(task_count, self._rendered_task_count)
        new_rendered_task_count = min(task_count, start + self._page_size)

        self._render_tasks(tasks[start:new_rendered_task_count])
        # Never shrinks below what was already revealed
        self._rendered_task_count = max(self._rendered_task_count, new_rendered_task_count)

        if self._rendered_task_count >= task_count:
            self._renderer.remove(self._load_more_button_component)
            self._load_more_button_component = None

    # Actions

    def dispatch_action(
        self, action_type: UserAction, update_type: UpdateType, update: Task | TaskDraft
    ) -> asyncio.Task[None] | None:
        """Send a user action to the server.

        Marks the origin busy, then runs the service call as an asyncio
        task. Returns None when the same task already has an action in
        flight.
        """
        key = NEW_TASK_KEY if action_type == UserAction.ADD_TASK else update.id  # type: ignore[union-attr]
        if key in self._pending:
            logger.debug("%s ignored, %s is busy", action_type.value, key)
            return None

        if action_type == UserAction.ADD_TASK:
            self._task_new_presenter.set_saving()
        else:
            presenter = self._task_presenters.get(key)
            if presenter is not None:
                presenter.set_view_state(
                    TaskViewState.DELETING
                    if action_type == UserAction.DELETE_TASK
                    else TaskViewState.SAVING
                )

        self._pending.add(key)
        task = asyncio.get_running_loop().create_task(
            self._run_action(key, action_type, update_type, update)
        )
        self._running.add(task)
        task.add_done_callback(self._running.discard)
        return task

    async def _run_action(
        self,
        key: str,
        action_type: UserAction,
        update_type: UpdateType,
        update: Task | TaskDraft,
    ) -> None:
        try:
            if action_type == UserAction.UPDATE_TASK:
                response = await self._api.update_task(update)  # type: ignore[arg-type]
            elif action_type == UserAction.ADD_TASK:
                response = await self._api.add_task(update)
            else:
                await self._api.delete_task(update)  # type: ignore[arg-type]
                response = update
        except TaskApiError as e:
            logger.warning("%s failed for %s: %s", action_type.value, key, e)
            self._set_aborting(key)
            return
        finally:
            self._pending.discard(key)

        try:
            if action_type == UserAction.UPDATE_TASK:
                self._tasks_model.update_task(update_type, response)
            elif action_type == UserAction.ADD_TASK:
                self._tasks_model.add_task(update_type, response)
            else:
                self._tasks_model.delete_task(update_type, response)
        except TaskNotFoundError:
            logger.debug("%s confirmed for %s, but it is no longer loaded", action_type.value, key)

    def _set_aborting(self, key: str) -> None:
        if key == NEW_TASK_KEY:
            self._task_new_presenter.set_aborting()
            return
        presenter = self._task_presenters.get(key)
        if presenter is None:
            logger.debug("No presenter for %s, failure not shown", key)
            return
        presenter.set_view_state(TaskViewState.ABORTING)

    async def wait_idle(self) -> None:
        """Wait for every in-flight action to finish."""
        while self._running:
            await asyncio.gather(*list(self._running), return_exceptions=True)

    # Model events

    def _handle_model_event(self, update_type: UpdateType, data: Any) -> None:
        if update_type == UpdateType.PATCH:
            presenter = self._task_presenters.get(data.id)
            if presenter is None:
                logger.debug("PATCH for %s, which is not rendered", data.id)
                return
            presenter.init(data)
        elif update_type == UpdateType.MINOR:
            self._clear_board()
            self._render_board()
        elif update_type == UpdateType.MAJOR:
            self._clear_board(reset_rendered_task_count=True, reset_sort_type=True)
            self._render_board()
        elif update_type == UpdateType.INIT:
            self._is_loading = False
            self._renderer.remove(self._loading_component)
            self._render_board()

    # Rendering

    def _get_tasks(self) -> list[Task]:
        return self._context.filter_service.apply(
            self._tasks_model.get_tasks(),
            self._filter_model.get_filter(),
            self._current_sort_type,
            now=self._context.clock(),
        )

    def _render_sort(self) -> None:
        self._sort_component = SortView(self._current_sort_type)
        self._sort_component.set_sort_type_change_handler(self.change_sort_mode)
        self._renderer.render(self._board_component, self._sort_component, RenderPosition.AFTERBEGIN)

    def _render_task(self, task: Task) -> None:
        presenter = TaskPresenter(self._task_list_component, self.dispatch_action, self._context)
        presenter.init(task)
        self._task_presenters[task.id] = presenter

    def _render_tasks(self, tasks: list[Task]) -> None:
        for task in tasks:
            self._render_task(task)

    def _render_loading(self) -> None:
        self._renderer.render(
            self._board_component, self._loading_component, RenderPosition.AFTERBEGIN
        )

    def _render_no_tasks(self) -> None:
        self._no_task_component = NoTaskView(self._filter_model.get_filter())
        self._renderer.render(
            self._board_component, self._no_task_component, RenderPosition.AFTERBEGIN
        )

    def _render_load_more_button(self) -> None:
        self._load_more_button_component = LoadMoreButtonView()
        self._load_more_button_component.set_click_handler(self.load_more)
        self._renderer.render(
            self._board_component, self._load_more_button_component, RenderPosition.BEFOREEND
        )

    def _clear_board(
        self, reset_rendered_task_count: bool = False, reset_sort_type: bool = False
    ) -> None:
        self._task_new_presenter.destroy()
        for presenter in self._task_presenters.values():
            presenter.destroy()
        self._task_presenters = {}

        for view in (
            self._sort_component,
            self._no_task_component,
            self._load_more_button_component,
        ):
            if view is not None:
                view.clear_handlers()
                self._renderer.remove(view)
        self._renderer.remove(self._loading_component)
        self._sort_component = None
        self._no_task_component = None
        self._load_more_button_component = None

        if reset_rendered_task_count:
            self._rendered_task_count = self._page_size

        if reset_sort_type:
            self._current_sort_type = SortType.DEFAULT

    def _render_board(self) -> None:
        if self._is_loading:
            self._render_loading()
            return

        tasks = self._get_tasks()
        task_count = len(tasks)

        if task_count == 0:
            self._render_no_tasks()
            return

        self._render_sort()
        self._render_tasks(tasks[: min(task_count, self._rendered_task_count)])

        if task_count > self._rendered_task_count:
            self._render_load_more_button()
