"""
Selection State Module
======================

Single-slot holder for the current selection with observer notification.

Design:
- Mutations serialized by a lock
- Observers notified after the lock is released, in registration order
- Notifications delivered in commit order, one change at a time
"""

import itertools
import threading
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, List, Optional

from rms_zone.catalog import Zone

Observer = Callable[[Optional[Zone]], None]


@dataclass(frozen=True)
class Subscription:
    """Handle returned by SelectionState.subscribe()."""

    subscription_id: int


class SelectionState:
    """
    Observable current selection.

    current() is None until the first select() and after clear().
    Every select()/clear() notifies each subscribed observer exactly once,
    even when the value does not change.

    Thread Safety:
        select() and clear() commit under the lock and queue the change.
        One thread at a time delivers queued changes, outside the lock and
        in commit order, so observers never finish on a stale value and may
        call back into the state. A change committed while another thread
        (or an observer further up the stack) is delivering is handed to
        that delivery and the call returns without waiting for it.

        If observers raise, the remaining observers are still notified and
        the first exception propagates to the thread that delivered it.
        The state stays committed.

    Usage:
        state = SelectionState()
        handle = state.subscribe(lambda zone: print(zone))
        state.select("sector3")   # prints sector3
        state.clear()             # prints None
        state.unsubscribe(handle)
    """

    def __init__(self):
        self._current: Optional[Zone] = None
        self._observers: Dict[int, Observer] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

        self._pending: Deque[Optional[Zone]] = deque()
        self._dispatching = False

    def current(self) -> Optional[Zone]:
        with self._lock:
            return self._current

    def select(self, zone: Zone) -> None:
        """
        Set the selection and notify observers.

        Raises:
            ValueError: If zone is not a non-empty string
        """
        if zone is None:
            raise ValueError("select() requires a zone; use clear() to unset")
        if not isinstance(zone, str) or not zone:
            raise ValueError(f"Zone must be a non-empty string, got {zone!r}")
        self._commit(zone)

    def clear(self) -> None:
        """Unset the selection and notify observers with None."""
        self._commit(None)

    def subscribe(self, observer: Observer) -> Subscription:
        if not callable(observer):
            raise TypeError(f"observer must be callable, got {type(observer).__name__}")
        with self._lock:
            subscription_id = next(self._ids)
            self._observers[subscription_id] = observer
        return Subscription(subscription_id)

    def unsubscribe(self, handle: Subscription) -> bool:
        """
        Remove an observer.

        Returns:
            True if the handle was subscribed, False if already removed
        """
        with self._lock:
            return self._observers.pop(handle.subscription_id, None) is not None

    def observer_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def _commit(self, value: Optional[Zone]) -> None:
        with self._lock:
            self._current = value
            self._pending.append(value)
            if self._dispatching:
                return
            self._dispatching = True

        self._drain()

    def _drain(self) -> None:
        first_error: Optional[BaseException] = None

        while True:
            with self._lock:
                if not self._pending:
                    self._dispatching = False
                    break
                value = self._pending.popleft()
                observers: List[Observer] = list(self._observers.values())

            for observer in observers:
                try:
                    observer(value)
                except Exception as e:
                    if first_error is None:
                        first_error = e

        if first_error is not None:
            raise first_error
