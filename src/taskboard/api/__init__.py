"""Task server client."""

from .client import TaskApiAuthError, TaskApiClient, TaskApiError, TaskApiNotFoundError

__all__ = [
    "TaskApiAuthError",
    "TaskApiClient",
    "TaskApiError",
    "TaskApiNotFoundError",
]
