"""Canonical task collection."""

from __future__ import annotations

import logging

from .enums import UpdateType
from .observable import Observable
from .task import Task

logger = logging.getLogger(__name__)


class TaskNotFoundError(KeyError):
    """Raised when a task id is not in the collection."""


class TasksModel(Observable):
    """Ordered task collection keyed by id.

    Each mutating call changes exactly one entity (or replaces the whole
    collection for ``set_tasks``) and fires exactly one notification.
    """

    def __init__(self) -> None:
        super().__init__()
        self._tasks: list[Task] = []

    def set_tasks(self, update_type: UpdateType, tasks: list[Task]) -> None:
        """Replace the whole collection, e.g. after the initial load."""
        self._tasks = list(tasks)
        logger.info("Loaded %d task(s)", len(self._tasks))
        self.notify(update_type, None)

    def get_tasks(self) -> list[Task]:
        """Get a copy of all tasks in collection order."""
        return list(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)

    def add_task(self, update_type: UpdateType, task: Task) -> None:
        """Insert a server-confirmed task at the front."""
        self._tasks = [task, *self._tasks]
        logger.info("Task added: %s", task.id)
        self.notify(update_type, task)

    def update_task(self, update_type: UpdateType, task: Task) -> None:
        """Replace the task with the same id."""
        index = self._index_of(task.id)
        self._tasks = [*self._tasks[:index], task, *self._tasks[index + 1 :]]
        logger.info("Task updated: %s", task.id)
        self.notify(update_type, task)

    def delete_task(self, update_type: UpdateType, task: Task) -> None:
        """Remove the task with the same id."""
        index = self._index_of(task.id)
        self._tasks = [*self._tasks[:index], *self._tasks[index + 1 :]]
        logger.info("Task deleted: %s", task.id)
        self.notify(update_type, task)

    def _index_of(self, task_id: str) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)
