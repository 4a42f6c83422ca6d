"""Filter bar view."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button

from ...models import FilterType
from .abstract import AbstractView


class FilterView(AbstractView):
    """One button per filter category, labelled with its task count."""

    element_classes = "main__filter"

    def __init__(self, counts: dict[FilterType, int], current_filter: FilterType) -> None:
        super().__init__()
        self.counts = counts
        self.current_filter = current_filter

    def compose(self) -> ComposeResult:
        with Horizontal():
            for filter_type in FilterType:
                count = self.counts.get(filter_type, 0)
                yield Button(
                    f"{filter_type.value.upper()} {count}",
                    id=f"filter-{filter_type.value}",
                    disabled=count == 0 and filter_type != self.current_filter,
                    classes="-active" if filter_type == self.current_filter else "",
                )

    def set_filter_type_change_handler(self, callback: Callable[[FilterType], None]) -> None:
        self._callbacks["filter_type_change"] = callback

    def on_button(self, button_id: str) -> None:
        if button_id.startswith("filter-"):
            self._emit("filter_type_change", FilterType(button_id.removeprefix("filter-")))
