"""Protocol for the remote task service."""

from typing import Protocol

from ..models import Task, TaskDraft


class TaskApiProtocol(Protocol):
    """Interface for the asynchronous task backend.

    Every call may raise ``TaskApiError``. Callers only rely on
    success versus failure, not on the error details.
    """

    async def get_tasks(self) -> list[Task]:
        """Load all tasks.

        Returns:
            List of all tasks in server order.
        """
        ...

    async def add_task(self, draft: TaskDraft) -> Task:
        """Create a task.

        Args:
            draft: Task data without an id.

        Returns:
            The created task with its server-assigned id.
        """
        ...

    async def update_task(self, task: Task) -> Task:
        """Update an existing task.

        Returns:
            The task as stored by the server.
        """
        ...

    async def delete_task(self, task: Task) -> None:
        """Delete a task."""
        ...
