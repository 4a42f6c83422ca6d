"""Board-wide register of the one open editor."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Editor(Protocol):
    def reset_view(self) -> None: ...


class ActiveEditor:
    """At most one task form is open at a time.

    Opening an editor first resets whichever editor was open before.
    """

    def __init__(self) -> None:
        self._current: Editor | None = None

    @property
    def current(self) -> Editor | None:
        return self._current

    def open(self, editor: Editor) -> None:
        previous = self._current
        if previous is not None and previous is not editor:
            self._current = None
            logger.debug("Closing editor %r", previous)
            previous.reset_view()
        self._current = editor

    def release(self, editor: Editor) -> None:
        if self._current is editor:
            self._current = None

