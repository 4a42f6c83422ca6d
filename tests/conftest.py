"""Shared fixtures."""

import pytest

from taskboard.context import BoardContext

from .fakes import NOW, FakeRenderer, FakeTaskApi, FakeTimers


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def api() -> FakeTaskApi:
    return FakeTaskApi()


@pytest.fixture
def timers() -> FakeTimers:
    return FakeTimers()


@pytest.fixture
def context(api: FakeTaskApi, renderer: FakeRenderer, timers: FakeTimers) -> BoardContext:
    """Board context wired with fakes and a fixed clock."""
    return BoardContext(
        api=api,
        renderer=renderer,
        page_size=8,
        abort_interval=0.6,
        call_later=timers.call_later,
        clock=lambda: NOW,
    )
