"""REST client for the task server."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ..models import Task, TaskDraft

logger = logging.getLogger(__name__)


class TaskApiError(Exception):
    """Base exception for task server errors."""

    pass


class TaskApiAuthError(TaskApiError):
    """Authorization rejected."""

    pass


class TaskApiNotFoundError(TaskApiError):
    """Resource not found."""

    pass


class TaskApiClient:
    """Async client for the task server.

    Provides a thin wrapper around the REST endpoints with:
    - Authorization header on every request
    - Mapping of transport and HTTP failures to TaskApiError
    - Request timing in the logs
    """

    def __init__(self, base_url: str, authorization: str, timeout: float = 10.0):
        """Initialize the client.

        Args:
            base_url: Server root, e.g. http://localhost:3000/task-manager
            authorization: Value of the Authorization header
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.authorization = authorization
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/",
            headers={
                "Authorization": authorization,
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> TaskApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get_tasks(self) -> list[Task]:
        """Load all tasks."""
        data = await self._request("GET", "tasks")
        return [self._parse_task(item) for item in data or []]

    async def add_task(self, draft: TaskDraft) -> Task:
        """Create a task and return it with its new id."""
        data = await self._request("POST", "tasks", payload=draft.to_server())
        return self._parse_task(data)

    async def update_task(self, task: Task) -> Task:
        """Store a changed task."""
        data = await self._request("PUT", f"tasks/{task.id}", payload=task.to_server())
        return self._parse_task(data)

    async def delete_task(self, task: Task) -> None:
        """Delete a task."""
        await self._request("DELETE", f"tasks/{task.id}", expect_json=False)

    @staticmethod
    def _parse_task(data: Any) -> Task:
        try:
            return Task.from_server(data)
        except (KeyError, TypeError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logger.error("Malformed task in response: %s", e)
            raise TaskApiError(f"Malformed task in response: {e}") from e

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        expect_json: bool = True,
    ) -> Any:
        """Send a request and decode the response.

        Raises:
            TaskApiAuthError: 401 or 403
            TaskApiNotFoundError: 404
            TaskApiError: transport errors, other HTTP errors, invalid JSON
        """
        logger.debug("%s %s: payload=%s", method, path, payload)

        start_time = time.monotonic()
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.RequestError as e:
            elapsed_ms = (time.monotonic() - start_time) * 1000
            logger.error("%s %s failed after %.0fms: %s", method, path, elapsed_ms, e)
            raise TaskApiError(f"Request failed: {e}") from e

        elapsed_ms = (time.monotonic() - start_time) * 1000

        if response.status_code in (401, 403):
            logger.error("%s %s: %d Unauthorized (%.0fms)", method, path, response.status_code, elapsed_ms)
            raise TaskApiAuthError("Authorization rejected. Check TASKBOARD_AUTHORIZATION.")
        if response.status_code == 404:
            logger.error("%s %s: 404 Not Found (%.0fms)", method, path, elapsed_ms)
            raise TaskApiNotFoundError(f"Resource not found: {path}")
        if response.status_code >= 400:
            logger.error("%s %s: HTTP %d (%.0fms)", method, path, response.status_code, elapsed_ms)
            raise TaskApiError(f"HTTP {response.status_code}: {response.text}")

        logger.info("%s %s: %d OK (%.0fms)", method, path, response.status_code, elapsed_ms)
        if not expect_json:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s: Invalid JSON response", method, path)
            raise TaskApiError(f"Invalid JSON response: {e}") from e
