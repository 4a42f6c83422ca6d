"""UI components."""

from .render import Renderer, RenderPosition, TextualRenderer

__all__ = [
    "RenderPosition",
    "Renderer",
    "TextualRenderer",
]
