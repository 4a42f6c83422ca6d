"""Task card view."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from ...models import WEEKDAYS, Task
from ...utils import humanize_due_date, is_task_expired
from .abstract import SmartView


class TaskView(SmartView):
    """A task displayed in the list."""

    def __init__(self, task: Task, now: datetime | None = None) -> None:
        super().__init__()
        self._task = task
        self._now = now
        self._data = {"is_disabled": False, "is_aborting": False}

    @property
    def task(self) -> Task:
        return self._task

    def get_classes(self) -> str:
        classes = ["card", f"card--{self._task.color.value}"]
        if is_task_expired(self._task.due_date, self._now):
            classes.append("card--deadline")
        if self._task.is_repeating:
            classes.append("card--repeat")
        if self._data["is_aborting"]:
            classes.append("shake")
        return " ".join(classes)

    def compose(self) -> ComposeResult:
        task = self._task
        disabled = self._data["is_disabled"]
        with Horizontal(classes="card__control"):
            yield Button("edit", id="edit", disabled=disabled)
            yield Button(
                "unarchive" if task.is_archive else "archive",
                id="archive",
                disabled=disabled,
            )
            yield Button(
                "favorites",
                id="favorites",
                disabled=disabled,
                classes="-active" if task.is_favorite else "",
            )
        yield Static(task.description, classes="card__text")
        if task.due_date is not None:
            yield Static(humanize_due_date(task.due_date), classes="card__date")
        if task.is_repeating:
            days = " ".join(day for day in WEEKDAYS if getattr(task.repeating, day))
            yield Static(f"repeat: {days}", classes="card__repeat")

    def set_edit_click_handler(self, callback: Callable[[], None]) -> None:
        self._callbacks["edit_click"] = callback

    def set_favorite_click_handler(self, callback: Callable[[], None]) -> None:
        self._callbacks["favorite_click"] = callback

    def set_archive_click_handler(self, callback: Callable[[], None]) -> None:
        self._callbacks["archive_click"] = callback

    def on_button(self, button_id: str) -> None:
        if self._data["is_disabled"]:
            return
        if button_id == "edit":
            self._emit("edit_click")
        elif button_id == "favorites":
            self._emit("favorite_click")
        elif button_id == "archive":
            self._emit("archive_click")
