"""
Explicit subscriber list used for rate change notifications.
"""

import itertools
import logging
import threading
from collections.abc import Callable

Listener = Callable[[], None]

logger = logging.getLogger(__name__)


class EventSubscribers:
    """
    Ordered registry of zero-argument callbacks.

    Callbacks run synchronously on the emitting thread, in subscription order.
    Emission iterates a snapshot, so a callback may subscribe or unsubscribe
    without affecting the current emission.
    """

    def __init__(self, name: str = "event") -> None:
        self.name = name
        self._listeners: dict[int, Listener] = {}
        self._handles = itertools.count(1)
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener) -> int:
        """Register ``listener`` and return a handle for unsubscribing."""
        with self._lock:
            handle = next(self._handles)
            self._listeners[handle] = listener
        return handle

    def unsubscribe(self, handle: int) -> bool:
        """Remove a listener. Returns False if the handle was not registered."""
        with self._lock:
            return self._listeners.pop(handle, None) is not None

    def emit(self) -> int:
        """Invoke every listener and return how many were called."""
        with self._lock:
            listeners = list(self._listeners.values())

        logger.debug(f"Emitting {self.name} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener()
        return len(listeners)

    def __call__(self) -> int:
        return self.emit()

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)
