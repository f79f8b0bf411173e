from __future__ import annotations

import collections.abc
import logging
import typing

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")

Listener = collections.abc.Callable[[T], typing.Any]


class ListenerRegistry(typing.Generic[T]):
    """Ordered set of callbacks.

    Adding a listener that is already registered does nothing, so a listener
    never fires twice for one event. A listener that raises is logged and
    skipped; the rest still run.
    """

    def __init__(self, kind: str = "listener"):
        self.kind = kind
        self._listeners: list[Listener[T]] = []

    def add(self, listener: Listener[T]) -> bool:
        if listener in self._listeners:
            logger.debug("%s %r already registered", self.kind, listener)
            return False
        self._listeners.append(listener)
        return True

    def remove(self, listener: Listener[T]) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def __contains__(self, listener):
        return listener in self._listeners

    def __len__(self):
        return len(self._listeners)

    def emit(self, value: T) -> int:
        failures = 0
        # iterate over a copy: a listener may add or remove listeners
        for listener in tuple(self._listeners):
            try:
                listener(value)
            except Exception:
                failures += 1
                logger.exception("%s %r failed while handling %r", self.kind, listener, value)
        return failures
