"""Data models."""

from .enums import Color, FilterType, SortType, TaskViewState, UpdateType, UserAction
from .filter_model import FilterModel
from .observable import Observable
from .task import WEEKDAYS, RepeatingDays, Task, TaskDraft, TaskValidationError
from .tasks_model import TaskNotFoundError, TasksModel

__all__ = [
    "WEEKDAYS",
    "Color",
    "FilterModel",
    "FilterType",
    "Observable",
    "RepeatingDays",
    "SortType",
    "Task",
    "TaskDraft",
    "TaskNotFoundError",
    "TaskValidationError",
    "TaskViewState",
    "TasksModel",
    "UpdateType",
    "UserAction",
]
