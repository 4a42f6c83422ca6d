"""Active filter state."""

from __future__ import annotations

from .enums import FilterType, UpdateType
from .observable import Observable


class FilterModel(Observable):
    """Holds the single active filter category."""

    def __init__(self, filter_type: FilterType = FilterType.ALL) -> None:
        super().__init__()
        self._active_filter = filter_type

    def get_filter(self) -> FilterType:
        return self._active_filter

    def set_filter(self, update_type: UpdateType, filter_type: FilterType) -> None:
        self._active_filter = filter_type
        self.notify(update_type, filter_type)
