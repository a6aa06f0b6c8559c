"""Unified event model for route resolution observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass

from arbor._types import RouteKind


# ---------------------------------------------------------------------------
# Directory scan events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FileIgnored:
    """A file matched an ignore pattern and was not scanned.

    Attributes:
        path: Context key of the ignored file.
        pattern: The pattern that matched.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    pattern: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class FileSkipped:
    """A platform variant for another platform was skipped.

    Attributes:
        path: Context key of the skipped file.
        platform: The file's platform suffix.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    platform: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RoutePlaced:
    """A file was placed into the directory tree.

    Attributes:
        path: Context key of the file.
        route: Route name of this placement.
        kind: Layout or view.
        specificity: Platform rank of the placement.
        replaced: Context key of a file this placement displaced, if any.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    route: str
    kind: RouteKind
    specificity: int
    replaced: str | None
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class SyntheticRouteAdded:
    """A generated route (default layout, sitemap, not-found) was added.

    Attributes:
        path: Context key of the generated route.
        route: Route name.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    route: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Resolution summary
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RoutesResolved:
    """A full resolution finished.

    Attributes:
        files: Number of keys in the module context.
        placements: Number of placements made during the scan.
        routes: Number of nodes in the final tree (0 when empty).
        duration_ms: Time spent resolving in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    files: int
    placements: int
    routes: int
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type ResolveEvent = (
    FileIgnored
    | FileSkipped
    | RoutePlaced
    | SyntheticRouteAdded
    | RoutesResolved
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
