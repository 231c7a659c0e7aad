"""Minimal publish/subscribe primitive shared by observable state objects."""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Subject(Generic[T]):
    """Holds listeners and broadcasts a payload to them on `_notify`."""

    def __init__(self) -> None:
        self._listeners: list[Listener[T]] = []

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register `listener` and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, payload: T) -> None:
        # Copy so a listener may unsubscribe while being notified.
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                # The mutation has already happened; observers cannot veto it.
                logger.exception("listener_failed subject=%s listener=%r", type(self).__name__, listener)
