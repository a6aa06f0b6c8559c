"""Event log — bounded, thread-safe store of resolution events.

A ``RouteWatcher`` resolves on its own thread's schedule while the CLI reads
the newest ``RoutesResolved`` summary, so every access takes the lock.
"""

import threading
from collections import deque

from arbor.observability.events import ResolveEvent


class EventLog:
    """Ring buffer of resolution events, oldest dropped first.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[ResolveEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: ResolveEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        path: str | None = None,
        limit: int = 100,
    ) -> list[ResolveEvent]:
        """Return matching events, newest first.

        Args:
            event_type: Only events of this type.
            path: Only events whose context key contains this substring.
            limit: Maximum number of events to return.

        """
        with self._lock:
            events = list(self._events)

        results: list[ResolveEvent] = []
        for event in reversed(events):
            if event_type is not None and not isinstance(event, event_type):
                continue
            if path is not None and path not in getattr(event, "path", ""):
                continue
            results.append(event)
            if len(results) >= limit:
                break
        return results

    def recent(self, n: int = 20) -> list[ResolveEvent]:
        """The *n* most recent events, oldest first."""
        with self._lock:
            items = list(self._events)
        return items[-n:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
