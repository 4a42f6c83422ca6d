"""Presenter for the filter bar."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..models import FilterType, UpdateType
from ..ui.render import Container, RenderPosition
from ..ui.widgets.filter import FilterView

if TYPE_CHECKING:
    from ..context import BoardContext

logger = logging.getLogger(__name__)


class FilterPresenter:
    """Shows per-filter counts and switches the active filter."""

    def __init__(self, filter_container: Container, context: BoardContext) -> None:
        self._container = filter_container
        self._context = context
        self._renderer = context.renderer
        self._filter_component: FilterView | None = None
        self._subscriptions: list[tuple[Any, int]] = []

    @property
    def filter_view(self) -> FilterView | None:
        return self._filter_component

    def init(self) -> None:
        if not self._subscriptions:
            self._subscriptions = [
                (model, model.subscribe(self._handle_model_event))
                for model in (self._context.tasks_model, self._context.filter_model)
            ]

        prev_filter_component = self._filter_component
        counts = self._context.filter_service.count(
            self._context.tasks_model.get_tasks(), now=self._context.clock()
        )
        self._filter_component = FilterView(counts, self._context.filter_model.get_filter())
        self._filter_component.set_filter_type_change_handler(self._handle_filter_type_change)

        if prev_filter_component is None:
            self._renderer.render(self._container, self._filter_component, RenderPosition.BEFOREEND)
            return

        prev_filter_component.clear_handlers()
        self._renderer.replace(self._filter_component, prev_filter_component)

    def destroy(self) -> None:
        for model, token in self._subscriptions:
            model.unsubscribe(token)
        self._subscriptions = []
        if self._filter_component is not None:
            self._filter_component.clear_handlers()
            self._renderer.remove(self._filter_component)
            self._filter_component = None

    def _handle_model_event(self, update_type: UpdateType, data: Any) -> None:
        self.init()

    def _handle_filter_type_change(self, filter_type: FilterType) -> None:
        if self._context.filter_model.get_filter() == filter_type:
            return
        logger.debug("Filter changed to %s", filter_type.value)
        self._context.filter_model.set_filter(UpdateType.MAJOR, filter_type)
