"""Main board screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header

from ...context import BoardContext
from ...presenters import BoardPresenter, FilterPresenter


class BoardScreen(Screen):
    """Hosts the filter bar and the board, each driven by a presenter."""

    def __init__(self, context: BoardContext, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.board_context = context
        self.filter_presenter: FilterPresenter | None = None
        self.board_presenter: BoardPresenter | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(id="filters")
        yield VerticalScroll(id="board")
        yield Footer()

    def on_mount(self) -> None:
        """Build presenters once the containers exist."""
        self.filter_presenter = FilterPresenter(self.query_one("#filters"), self.board_context)
        self.board_presenter = BoardPresenter(self.query_one("#board"), self.board_context)
        self.filter_presenter.init()
        self.board_presenter.init()

    def on_unmount(self) -> None:
        if self.board_presenter is not None:
            self.board_presenter.destroy()
        if self.filter_presenter is not None:
            self.filter_presenter.destroy()
