from __future__ import annotations

import logging
from threading import Lock, RLock
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_LOGGER = logging.getLogger(__name__)


class ChangeSubscription:
    """Handle returned by :meth:`OptionsMonitor.on_change`.

    Disposing it detaches the listener. Disposing twice is a no-op.
    """

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release
        self._lock = Lock()

    @property
    def disposed(self) -> bool:
        return self._release is None

    def dispose(self) -> None:
        with self._lock:
            release, self._release = self._release, None
        if release is not None:
            release()

    def __enter__(self) -> "ChangeSubscription":
        return self

    def __exit__(self, *_: object) -> None:
        self.dispose()


class OptionsMonitor(Generic[T]):
    """Holds the current options value and tells listeners when it changes.

    Values are published by replacing a single reference, so a reader sees
    either the old value or the new one. Swaps and their notifications are
    serialized, so listeners see values in the order they were set.
    """

    def __init__(self, initial: T) -> None:
        self._current = initial
        self._lock = Lock()
        self._delivery = RLock()
        self._listeners: dict[int, Callable[[T], None]] = {}
        self._next_id = 0

    @property
    def current(self) -> T:
        return self._current

    def set(self, value: T) -> None:
        with self._delivery:
            with self._lock:
                self._current = value
                listeners = tuple(self._listeners.values())
            _LOGGER.debug("options changed, notifying %d listener(s)",
                          len(listeners))
            for listener in listeners:
                listener(value)

    def on_change(
        self,
        listener: Callable[[T], None],
        *,
        notify_current: bool = False,
    ) -> ChangeSubscription:
        """Register ``listener``.

        With ``notify_current`` the listener is also called with the current
        value before any later change can reach it.
        """
        with self._delivery:
            with self._lock:
                key = self._next_id
                self._next_id += 1
                self._listeners[key] = listener
                current = self._current
            if notify_current:
                listener(current)

        def _release() -> None:
            with self._lock:
                self._listeners.pop(key, None)

        return ChangeSubscription(_release)

    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)
