"""View components."""

from .abstract import AbstractView, SmartView, ViewElement
from .board import (
    BoardView,
    LoadingView,
    LoadMoreButtonView,
    NoTaskView,
    SortView,
    TaskListView,
)
from .filter import FilterView
from .task_card import TaskView
from .task_edit import TaskEditView

__all__ = [
    "AbstractView",
    "BoardView",
    "FilterView",
    "LoadMoreButtonView",
    "LoadingView",
    "NoTaskView",
    "SmartView",
    "SortView",
    "TaskEditView",
    "TaskListView",
    "TaskView",
    "ViewElement",
]
