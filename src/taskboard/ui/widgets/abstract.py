"""Base classes for views.

A view is a plain object holding display state and user callbacks. Its
Textual widget is built lazily by ``get_element`` and regenerated by
``update_element``, so presenters can drive views without a running app.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from textual import events
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Button, Checkbox, Input, RadioSet


class ViewElement(Widget):
    """Textual widget backing a view. Routes widget events to the view."""

    DEFAULT_CSS = """
    ViewElement {
        height: auto;
    }
    """

    def __init__(self, view: AbstractView, classes: str = "") -> None:
        super().__init__(classes=classes)
        self.view = view

    def compose(self) -> ComposeResult:
        yield from self.view.compose()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.view.on_button(event.button.id or "")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.view.on_input(event.input.id or "", event.value)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self.view.on_checkbox(event.checkbox.id or "", event.value)

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        event.stop()
        self.view.on_radio(event.radio_set.id or "", event.pressed.id or "")

    def on_key(self, event: events.Key) -> None:
        if self.view.on_key(event.key):
            event.stop()


class AbstractView:
    """Base view: lazy element, template regeneration, named callbacks."""

    element_classes = ""

    def __init__(self) -> None:
        self._element: ViewElement | None = None
        self._callbacks: dict[str, Callable[..., Any]] = {}

    @property
    def element(self) -> ViewElement | None:
        """The built element, or None if never rendered."""
        return self._element

    def compose(self) -> ComposeResult:
        """Yield the child widgets of the element."""
        yield from ()

    def get_classes(self) -> str:
        return self.element_classes

    def get_element(self) -> ViewElement:
        if self._element is None:
            self._element = ViewElement(self, classes=self.get_classes())
        return self._element

    def remove_element(self) -> None:
        self._element = None

    def update_element(self) -> None:
        """Rebuild the element's children from current state."""
        element = self._element
        if element is None or not element.is_attached:
            return
        element.set_classes(self.get_classes())
        element.refresh(recompose=True)

    def clear_handlers(self) -> None:
        self._callbacks.clear()

    def _emit(self, name: str, *args: Any) -> None:
        callback = self._callbacks.get(name)
        if callback is not None:
            callback(*args)

    # Widget event hooks, overridden by views that have controls

    def on_button(self, button_id: str) -> None:
        pass

    def on_input(self, input_id: str, value: str) -> None:
        pass

    def on_checkbox(self, checkbox_id: str, value: bool) -> None:
        pass

    def on_radio(self, radio_set_id: str, pressed_id: str) -> None:
        pass

    def on_key(self, key: str) -> bool:
        """Return True when the key was handled."""
        return False


class SmartView(AbstractView):
    """View with local state that can be changed and re-rendered."""

    def __init__(self) -> None:
        super().__init__()
        self._data: dict[str, Any] = {}

    @property
    def data(self) -> dict[str, Any]:
        return dict(self._data)

    def update_data(self, just_data_updating: bool = False, **changes: Any) -> None:
        """Merge changes into the state; re-render unless only data changed."""
        if not changes:
            return
        self._data.update(changes)
        if not just_data_updating:
            self.update_element()
