"""Render/remove primitives used by presenters."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from textual.widget import Widget

from .widgets.abstract import AbstractView

Container = AbstractView | Widget


class RenderPosition(str, Enum):
    AFTERBEGIN = "afterbegin"
    BEFOREEND = "beforeend"


class Renderer(Protocol):
    """What presenters need from the display layer."""

    def render(
        self,
        container: Container,
        view: AbstractView,
        position: RenderPosition = RenderPosition.BEFOREEND,
    ) -> None: ...

    def remove(self, view: AbstractView | None) -> None: ...

    def replace(self, new_view: AbstractView, old_view: AbstractView) -> None: ...


class TextualRenderer:
    """Mounts view elements into a Textual widget tree."""

    def render(
        self,
        container: Container,
        view: AbstractView,
        position: RenderPosition = RenderPosition.BEFOREEND,
    ) -> None:
        parent = container.get_element() if isinstance(container, AbstractView) else container
        element = view.get_element()
        if position == RenderPosition.AFTERBEGIN and parent.children:
            parent.mount(element, before=0)
        else:
            parent.mount(element)

    def remove(self, view: AbstractView | None) -> None:
        if view is None:
            return
        element = view.element
        if element is not None and element.is_attached:
            element.remove()
        view.remove_element()

    def replace(self, new_view: AbstractView, old_view: AbstractView) -> None:
        old_element = old_view.element
        if old_element is None or old_element.parent is None:
            return
        parent = old_element.parent
        if not isinstance(parent, Widget):
            return
        parent.mount(new_view.get_element(), after=old_element)
        old_element.remove()
        old_view.remove_element()
