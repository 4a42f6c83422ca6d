"""Synchronous publish/subscribe base for models."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any

from .enums import UpdateType

logger = logging.getLogger(__name__)

Handler = Callable[[UpdateType, Any], None]


class Observable:
    """Delivers (update_type, payload) to subscribers in subscription order."""

    def __init__(self) -> None:
        self._subscribers: dict[int, Handler] = {}
        self._tokens = itertools.count(1)

    def subscribe(self, handler: Handler) -> int:
        """Register a handler and return its token."""
        token = next(self._tokens)
        self._subscribers[token] = handler
        return token

    def unsubscribe(self, token: int) -> None:
        """Remove a handler. Unknown tokens are ignored."""
        self._subscribers.pop(token, None)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify(self, update_type: UpdateType, payload: Any = None) -> None:
        # Snapshot so handlers may unsubscribe while being notified
        handlers = list(self._subscribers.values())
        logger.debug(
            "%s notify %s to %d subscriber(s)",
            type(self).__name__,
            update_type.value,
            len(handlers),
        )
        for handler in handlers:
            handler(update_type, payload)
