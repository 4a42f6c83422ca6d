"""Application context shared by the presenters of one board."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from .models import FilterModel, TasksModel
from .presenters.editor import ActiveEditor
from .services import FilterService
from .ui.render import Renderer, TextualRenderer
from .utils import now_local

if TYPE_CHECKING:
    from .config import Settings
    from .repositories import TaskApiProtocol


class Cancellable(Protocol):
    def cancel(self) -> Any: ...


def call_later_on_loop(delay: float, callback: Callable[[], None]) -> Cancellable:
    """Schedule ``callback`` on the running event loop."""
    return asyncio.get_running_loop().call_later(delay, callback)


@dataclass
class BoardContext:
    """Models, service and collaborators owned by one board.

    Nothing here is global; tests build as many contexts as they need.
    """

    api: TaskApiProtocol
    tasks_model: TasksModel = field(default_factory=TasksModel)
    filter_model: FilterModel = field(default_factory=FilterModel)
    renderer: Renderer = field(default_factory=TextualRenderer)
    active_editor: ActiveEditor = field(default_factory=ActiveEditor)
    filter_service: FilterService = field(default_factory=FilterService)
    page_size: int = 8
    abort_interval: float = 0.6
    call_later: Callable[[float, Callable[[], None]], Cancellable] = call_later_on_loop
    clock: Callable[[], datetime] = now_local

    @classmethod
    def from_settings(cls, settings: Settings, api: TaskApiProtocol, **kwargs: Any) -> BoardContext:
        return cls(
            api=api,
            page_size=settings.page_size,
            abort_interval=settings.abort_interval,
            **kwargs,
        )
