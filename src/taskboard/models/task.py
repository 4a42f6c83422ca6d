"""Task domain model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from ..utils.datetime import from_iso, to_iso
from .enums import Color

WEEKDAYS = ("mo", "tu", "we", "th", "fr", "sa", "su")


class TaskValidationError(ValueError):
    """Form input that cannot become a task."""


class RepeatingDays(BaseModel):
    """Weekdays a task repeats on."""

    mo: bool = False
    tu: bool = False
    we: bool = False
    th: bool = False
    fr: bool = False
    sa: bool = False
    su: bool = False

    @property
    def is_repeating(self) -> bool:
        """True when at least one day is set."""
        return any(getattr(self, day) for day in WEEKDAYS)

    def toggled(self, day: str) -> "RepeatingDays":
        """Return a copy with one day flipped."""
        if day not in WEEKDAYS:
            raise ValueError(f"Unknown weekday: {day}")
        return self.model_copy(update={day: not getattr(self, day)})


class TaskDraft(BaseModel):
    """Task data without a server-assigned id.

    Field defaults are the values of a freshly opened "new task" form.
    """

    description: str = ""
    due_date: datetime | None = None
    repeating: RepeatingDays = Field(default_factory=RepeatingDays)
    color: Color = Color.BLACK
    is_archive: bool = False
    is_favorite: bool = False

    @field_validator("due_date")
    @classmethod
    def _localize_due_date(cls, value: datetime | None) -> datetime | None:
        # Naive datetimes are taken as local time
        if value is not None and value.tzinfo is None:
            return value.astimezone()
        return value

    @model_validator(mode="after")
    def _check_date_or_repeat(self):
        if self.due_date is not None and self.repeating.is_repeating:
            raise ValueError("A task with a due date cannot repeat")
        return self

    @property
    def is_repeating(self) -> bool:
        return self.repeating.is_repeating

    def to_server(self) -> dict[str, Any]:
        """Convert to the REST payload shape."""
        return {
            "description": self.description,
            "due_date": to_iso(self.due_date) if self.due_date else None,
            "repeating_days": self.repeating.model_dump(),
            "color": self.color.value,
            "is_archived": self.is_archive,
            "is_favorite": self.is_favorite,
        }


class Task(TaskDraft):
    """A task confirmed by the server."""

    id: str

    def to_server(self) -> dict[str, Any]:
        data = super().to_server()
        data["id"] = self.id
        return data

    @classmethod
    def from_server(cls, data: dict[str, Any]) -> "Task":
        """Create Task from a REST payload."""
        due_date = data.get("due_date")
        return cls(
            id=str(data["id"]),
            description=data.get("description", ""),
            due_date=from_iso(due_date) if due_date else None,
            repeating=RepeatingDays(**(data.get("repeating_days") or {})),
            color=data.get("color", Color.BLACK),
            is_archive=bool(data.get("is_archived", False)),
            is_favorite=bool(data.get("is_favorite", False)),
        )
