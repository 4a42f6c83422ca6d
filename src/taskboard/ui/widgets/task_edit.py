"""Task edit form view."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Checkbox, Input, RadioButton, RadioSet, Static

from ...models import WEEKDAYS, Color, RepeatingDays, TaskDraft, TaskValidationError
from ...utils import end_of_day, now_local
from .abstract import SmartView


def _parse_due_date(text: str) -> datetime:
    try:
        day = date.fromisoformat(text.strip())
    except ValueError as e:
        raise TaskValidationError(f"Invalid due date: {text!r} (expected YYYY-MM-DD)") from e
    return end_of_day(datetime(day.year, day.month, day.day).astimezone())


class TaskEditView(SmartView):
    """Form for editing an existing task or composing a new one.

    Holds a local draft; the bound task is never modified.
    """

    def __init__(self, task: TaskDraft | None = None) -> None:
        super().__init__()
        self._source = task or TaskDraft()
        self._data = self.parse_task_to_data(self._source)

    @staticmethod
    def parse_task_to_data(task: TaskDraft) -> dict[str, Any]:
        return {
            "description": task.description,
            "due_date_text": task.due_date.date().isoformat() if task.due_date else "",
            "repeating": task.repeating,
            "color": task.color,
            "is_due_date": task.due_date is not None,
            "is_repeating": task.is_repeating,
            "is_disabled": False,
            "is_saving": False,
            "is_deleting": False,
            "is_aborting": False,
            "error": None,
        }

    def reset(self, task: TaskDraft) -> None:
        """Discard the draft and show ``task`` again."""
        self._source = task
        self.update_data(**self.parse_task_to_data(task))

    def get_draft(self) -> TaskDraft:
        """Build a draft from the form.

        Raises:
            TaskValidationError: empty description or unparseable date
        """
        data = self._data
        description = data["description"].strip()
        if not description:
            raise TaskValidationError("Description is required")

        due_date = _parse_due_date(data["due_date_text"]) if data["is_due_date"] else None
        repeating = data["repeating"] if data["is_repeating"] else RepeatingDays()

        try:
            return TaskDraft(
                description=description,
                due_date=due_date,
                repeating=repeating,
                color=data["color"],
                is_archive=self._source.is_archive,
                is_favorite=self._source.is_favorite,
            )
        except ValidationError as e:
            raise TaskValidationError(str(e)) from e

    def get_classes(self) -> str:
        classes = ["card", "card--edit", f"card--{self._data['color'].value}"]
        if self._data["is_repeating"]:
            classes.append("card--repeat")
        if self._data["is_aborting"]:
            classes.append("shake")
        return " ".join(classes)

    def compose(self) -> ComposeResult:
        data = self._data
        disabled = data["is_disabled"]

        yield Input(
            value=data["description"],
            placeholder="Start typing your text here...",
            id="description",
            disabled=disabled,
        )

        with Horizontal(classes="card__dates"):
            yield Button(
                f"date: {'yes' if data['is_due_date'] else 'no'}",
                id="toggle-date",
                disabled=disabled,
            )
            yield Button(
                f"repeat: {'yes' if data['is_repeating'] else 'no'}",
                id="toggle-repeat",
                disabled=disabled,
            )
        if data["is_due_date"]:
            yield Input(
                value=data["due_date_text"],
                placeholder="YYYY-MM-DD",
                id="due-date",
                disabled=disabled,
            )
        if data["is_repeating"]:
            with Horizontal(classes="card__repeat-days"):
                for day in WEEKDAYS:
                    yield Checkbox(
                        day,
                        value=getattr(data["repeating"], day),
                        id=f"repeat-{day}",
                        disabled=disabled,
                    )

        with RadioSet(id="color", disabled=disabled):
            for color in Color:
                yield RadioButton(
                    color.value, value=color == data["color"], id=f"color-{color.value}"
                )

        if data["error"]:
            yield Static(data["error"], classes="card__error")

        with Horizontal(classes="card__status-btns"):
            yield Button(
                "saving..." if data["is_saving"] else "save",
                id="save",
                variant="primary",
                disabled=disabled,
            )
            yield Button(
                "deleting..." if data["is_deleting"] else "delete",
                id="delete",
                variant="error",
                disabled=disabled,
            )

    def set_form_submit_handler(self, callback: Callable[[], None]) -> None:
        self._callbacks["form_submit"] = callback

    def set_delete_click_handler(self, callback: Callable[[], None]) -> None:
        self._callbacks["delete_click"] = callback

    def set_escape_handler(self, callback: Callable[[], None]) -> None:
        self._callbacks["escape"] = callback

    def on_button(self, button_id: str) -> None:
        if self._data["is_disabled"]:
            return
        if button_id == "save":
            self._emit("form_submit")
        elif button_id == "delete":
            self._emit("delete_click")
        elif button_id == "toggle-date":
            self.toggle_due_date()
        elif button_id == "toggle-repeat":
            self.toggle_repeating()

    def toggle_due_date(self) -> None:
        is_due_date = not self._data["is_due_date"]
        changes: dict[str, Any] = {"is_due_date": is_due_date, "error": None}
        if is_due_date:
            changes["is_repeating"] = False
            if not self._data["due_date_text"]:
                changes["due_date_text"] = now_local().date().isoformat()
        self.update_data(**changes)

    def toggle_repeating(self) -> None:
        is_repeating = not self._data["is_repeating"]
        changes: dict[str, Any] = {"is_repeating": is_repeating, "error": None}
        if is_repeating:
            changes["is_due_date"] = False
        self.update_data(**changes)

    def on_input(self, input_id: str, value: str) -> None:
        if input_id == "description":
            self.update_data(description=value, just_data_updating=True)
        elif input_id == "due-date":
            self.update_data(due_date_text=value, just_data_updating=True)

    def on_checkbox(self, checkbox_id: str, value: bool) -> None:
        day = checkbox_id.removeprefix("repeat-")
        if day in WEEKDAYS and getattr(self._data["repeating"], day) != value:
            repeating = self._data["repeating"].toggled(day)
            self.update_data(repeating=repeating, just_data_updating=True)

    def on_radio(self, radio_set_id: str, pressed_id: str) -> None:
        if radio_set_id != "color" or not pressed_id.startswith("color-"):
            return
        color = Color(pressed_id.removeprefix("color-"))
        if color != self._data["color"]:
            # Re-render so the card's color class follows the choice
            self.update_data(color=color)

    def on_key(self, key: str) -> bool:
        if key == "escape":
            self._emit("escape")
            return True
        return False
