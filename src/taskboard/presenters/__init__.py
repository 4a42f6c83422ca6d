"""Presenters binding models to views."""

from .board import NEW_TASK_KEY, BoardPresenter
from .editor import ActiveEditor
from .filter import FilterPresenter
from .task import TaskPresenter
from .task_new import TaskNewPresenter

__all__ = [
    "NEW_TASK_KEY",
    "ActiveEditor",
    "BoardPresenter",
    "FilterPresenter",
    "TaskNewPresenter",
    "TaskPresenter",
]
