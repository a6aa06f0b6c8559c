"""Route resolution observability — frozen events in a bounded log.

Quick Start:
    >>> from arbor.observability import EventLog, ResolveCollector
    >>> collector = ResolveCollector(EventLog())
    >>> # get_routes(context, options, collector=collector)
    >>> # collector.log.query(event_type=FileSkipped)

"""

from arbor.observability.collector import ResolveCollector
from arbor.observability.events import (
    FileIgnored,
    FileSkipped,
    ResolveEvent,
    RoutePlaced,
    RoutesResolved,
    SyntheticRouteAdded,
    now_ns,
)
from arbor.observability.log import EventLog

__all__ = [
    "EventLog",
    "FileIgnored",
    "FileSkipped",
    "ResolveCollector",
    "ResolveEvent",
    "RoutePlaced",
    "RoutesResolved",
    "SyntheticRouteAdded",
    "now_ns",
]
