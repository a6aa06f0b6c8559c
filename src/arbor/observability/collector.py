"""Resolve collector — records route resolution events into an EventLog.

Passed to ``get_routes(collector=...)``.  Resolution records nothing when
no collector is given.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arbor.observability.events import (
    FileIgnored,
    FileSkipped,
    RoutePlaced,
    RoutesResolved,
    SyntheticRouteAdded,
    now_ns,
)
from arbor.observability.log import EventLog

if TYPE_CHECKING:
    from arbor._types import RouteKind


class ResolveCollector:
    """Event collector for route resolution.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Directory scan -----

    def record_ignored(self, path: str, pattern: str) -> None:
        """Record a file excluded by an ignore pattern."""
        self._log.append(FileIgnored(path=path, pattern=pattern, timestamp_ns=now_ns()))

    def record_skipped(self, path: str, platform: str) -> None:
        """Record a platform variant skipped for the current platform."""
        self._log.append(FileSkipped(path=path, platform=platform, timestamp_ns=now_ns()))

    def record_placed(
        self,
        path: str,
        route: str,
        *,
        kind: RouteKind,
        specificity: int,
        replaced: str | None = None,
    ) -> None:
        """Record a placement into the directory tree."""
        self._log.append(
            RoutePlaced(
                path=path,
                route=route,
                kind=kind,
                specificity=int(specificity),
                replaced=replaced,
                timestamp_ns=now_ns(),
            )
        )

    def record_synthetic(self, path: str, route: str) -> None:
        """Record a generated route."""
        self._log.append(SyntheticRouteAdded(path=path, route=route, timestamp_ns=now_ns()))

    # ----- Summary -----

    def record_resolved(
        self,
        *,
        files: int,
        placements: int,
        routes: int,
        duration_ms: float = 0.0,
    ) -> None:
        """Record the end of a resolution."""
        self._log.append(
            RoutesResolved(
                files=files,
                placements=placements,
                routes=routes,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )
