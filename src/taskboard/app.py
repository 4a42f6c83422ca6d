"""taskboard TUI Application."""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from .api import TaskApiClient, TaskApiError
from .config import Settings
from .context import BoardContext
from .models import UpdateType
from .repositories import TaskApiProtocol
from .ui.screens.board import BoardScreen

logger = logging.getLogger(__name__)


class TaskboardApp(App):
    """taskboard - terminal task board."""

    TITLE = "taskboard"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("n", "new_task", "New", show=True),
        Binding("r", "refresh", "Reload", show=True),
    ]

    def __init__(self, settings: Settings | None = None, api: TaskApiProtocol | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services(api)

    def _init_services(self, api: TaskApiProtocol | None) -> None:
        """Initialize the task server client and the board context."""
        self.api: TaskApiProtocol = api or TaskApiClient(
            self.settings.server_url,
            self.settings.authorization,
            timeout=self.settings.request_timeout,
        )
        self.board_context = BoardContext.from_settings(self.settings, self.api)

    def on_mount(self) -> None:
        """Show the board, then load tasks in the background."""
        self.push_screen(BoardScreen(self.board_context))
        self.run_worker(self.load_tasks(UpdateType.INIT), group="load", exclusive=True)

    async def on_unmount(self) -> None:
        if isinstance(self.api, TaskApiClient):
            await self.api.close()

    async def load_tasks(self, update_type: UpdateType) -> None:
        """Fetch all tasks and hand them to the model.

        A failed first load still ends the loading state, with no tasks.
        """
        try:
            tasks = await self.api.get_tasks()
        except TaskApiError as e:
            logger.error("Failed to load tasks: %s", e)
            self.notify(f"Failed to load tasks: {e}", severity="error")
            if update_type != UpdateType.INIT:
                return
            tasks = []
        self.board_context.tasks_model.set_tasks(update_type, tasks)

    def action_refresh(self) -> None:
        """Reload all tasks from the server."""
        self.run_worker(self.load_tasks(UpdateType.MAJOR), group="load", exclusive=True)

    def action_new_task(self) -> None:
        """Open the new task form."""
        screen = self.screen
        if not isinstance(screen, BoardScreen) or screen.board_presenter is None:
            return
        screen.board_presenter.create_task()


def run(settings: Settings | None = None) -> None:
    """Run the taskboard application."""
    app = TaskboardApp(settings)
    app.run()
