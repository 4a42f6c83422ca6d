"""Board-level views: containers, placeholders, sort and load-more controls."""

from __future__ import annotations

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from ...models import FilterType, SortType
from .abstract import AbstractView

NO_TASK_MESSAGES: dict[FilterType, str] = {
    FilterType.ALL: "Press N to create your first task",
    FilterType.OVERDUE: "There are no overdue tasks now",
    FilterType.TODAY: "There are no tasks today",
    FilterType.FAVORITES: "There are no favorite tasks now",
    FilterType.REPEATING: "There are no repeating tasks now",
    FilterType.ARCHIVE: "There are no archived tasks now",
}

SORT_LABELS: dict[SortType, str] = {
    SortType.DEFAULT: "SORT BY DEFAULT",
    SortType.DATE_UP: "SORT BY DATE up",
    SortType.DATE_DOWN: "SORT BY DATE down",
}


class BoardView(AbstractView):
    element_classes = "board"


class TaskListView(AbstractView):
    element_classes = "board__tasks"


class LoadingView(AbstractView):
    element_classes = "board__no-tasks"

    def compose(self) -> ComposeResult:
        yield Static("Loading...")


class NoTaskView(AbstractView):
    """Empty-state message for the active filter."""

    element_classes = "board__no-tasks"

    def __init__(self, filter_type: FilterType = FilterType.ALL) -> None:
        super().__init__()
        self.filter_type = filter_type

    @property
    def message(self) -> str:
        return NO_TASK_MESSAGES[self.filter_type]

    def compose(self) -> ComposeResult:
        yield Static(self.message)


class LoadMoreButtonView(AbstractView):
    element_classes = "load-more"

    def compose(self) -> ComposeResult:
        yield Button("load more", id="load-more")

    def set_click_handler(self, callback: Callable[[], None]) -> None:
        self._callbacks["click"] = callback

    def on_button(self, button_id: str) -> None:
        if button_id == "load-more":
            self._emit("click")


class SortView(AbstractView):
    """Sort mode switcher."""

    element_classes = "board__filter-list"

    def __init__(self, current_sort_type: SortType = SortType.DEFAULT) -> None:
        super().__init__()
        self.current_sort_type = current_sort_type

    def compose(self) -> ComposeResult:
        with Horizontal():
            for sort_type, label in SORT_LABELS.items():
                yield Button(
                    label,
                    id=f"sort-{sort_type.value}",
                    classes="-active" if sort_type == self.current_sort_type else "",
                )

    def set_sort_type_change_handler(self, callback: Callable[[SortType], None]) -> None:
        self._callbacks["sort_type_change"] = callback

    def on_button(self, button_id: str) -> None:
        if button_id.startswith("sort-"):
            self._emit("sort_type_change", SortType(button_id.removeprefix("sort-")))
