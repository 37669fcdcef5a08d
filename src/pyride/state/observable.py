"""Synchronous observer plumbing shared by the stores.

Listeners run on the caller's thread, in subscription order, after each
committed mutation. A mutation issued from inside a listener is queued and
committed once the current notification round has reached every listener,
so no listener ever sees rounds interleave.
"""

from __future__ import annotations

import itertools
import logging
from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Notifier(Generic[T]):
    """Ordered listener registry."""

    def __init__(self) -> None:
        self._listeners: dict[int, Listener[T]] = {}
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Unsubscribe:
        """Register *listener*; the returned callable removes it (idempotent)."""
        token = next(self._ids)
        self._listeners[token] = listener

        def _unsubscribe() -> None:
            self._listeners.pop(token, None)

        return _unsubscribe

    def notify(self, value: T) -> None:
        # Snapshot the registry: listeners added or removed mid-round take
        # effect from the next round.
        for listener in list(self._listeners.values()):
            try:
                listener(value)
            except Exception:  # noqa: BLE001
                _logger.exception("Store listener %r failed", listener)


class ObservableStore(Generic[T]):
    """Holds one immutable snapshot and publishes every replacement."""

    def __init__(self, initial: T, *, notifier: Notifier[T] | None = None) -> None:
        self._state = initial
        self._notifier: Notifier[T] = notifier if notifier is not None else Notifier()
        self._pending: deque[Callable[[T], T]] = deque()
        self._notifying = False

    @property
    def snapshot(self) -> T:
        return self._state

    def subscribe(self, listener: Listener[T]) -> Unsubscribe:
        return self._notifier.subscribe(listener)

    def _commit(self, update: Callable[[T], T]) -> None:
        """Apply *update* to the current snapshot and notify listeners."""
        self._pending.append(update)
        if self._notifying:
            return
        self._notifying = True
        try:
            while self._pending:
                step = self._pending.popleft()
                self._state = step(self._state)
                self._notifier.notify(self._state)
        finally:
            self._notifying = False
            self._pending.clear()
