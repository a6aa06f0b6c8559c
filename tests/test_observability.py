"""Tests for arbor.observability — route resolution events."""

import threading

import pytest

from arbor.observability.collector import ResolveCollector
from arbor.observability.events import (
    FileIgnored,
    FileSkipped,
    RoutePlaced,
    RoutesResolved,
    SyntheticRouteAdded,
    now_ns,
)
from arbor.observability.log import EventLog


def _placed(path: str, route: str = "index") -> RoutePlaced:
    return RoutePlaced(
        path=path, route=route, kind="view", specificity=0,
        replaced=None, timestamp_ns=now_ns(),
    )


# ---------------------------------------------------------------------------
# EventLog
# ---------------------------------------------------------------------------


class TestEventLog:
    """Tests for the event log store."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_placed("./index.tsx"))
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        for i in range(10):
            log.append(_placed(f"./{i}.tsx"))
        assert len(log) == 5

    def test_recent(self) -> None:
        log = EventLog()
        for i in range(5):
            log.append(_placed(f"./{i}.tsx"))
        recent = log.recent(3)
        assert len(recent) == 3
        assert recent[-1].path == "./4.tsx"  # type: ignore[union-attr]

    def test_query_by_type(self) -> None:
        log = EventLog()
        log.append(_placed("./a.tsx"))
        log.append(FileIgnored(path="./+html.tsx", pattern="html", timestamp_ns=now_ns()))
        log.append(_placed("./b.tsx"))

        results = log.query(event_type=RoutePlaced)
        assert len(results) == 2
        assert all(isinstance(r, RoutePlaced) for r in results)

    def test_query_newest_first(self) -> None:
        log = EventLog()
        log.append(_placed("./a.tsx"))
        log.append(_placed("./b.tsx"))
        assert [r.path for r in log.query()] == ["./b.tsx", "./a.tsx"]  # type: ignore[union-attr]

    def test_query_by_path(self) -> None:
        log = EventLog()
        log.append(_placed("./users/[id].tsx"))
        log.append(_placed("./index.tsx"))
        log.append(RoutesResolved(
            files=2, placements=2, routes=4, duration_ms=0.1, timestamp_ns=now_ns(),
        ))
        results = log.query(path="users")
        assert len(results) == 1

    def test_query_limit(self) -> None:
        log = EventLog()
        for i in range(10):
            log.append(_placed(f"./{i}.tsx"))
        assert len(log.query(limit=3)) == 3

    def test_thread_safety(self) -> None:
        log = EventLog()

        def worker(n: int) -> None:
            for i in range(100):
                log.append(_placed(f"./{n}/{i}.tsx"))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(log) == 1000


# ---------------------------------------------------------------------------
# ResolveCollector
# ---------------------------------------------------------------------------


class TestResolveCollector:
    def test_default_log(self) -> None:
        assert isinstance(ResolveCollector().log, EventLog)

    def test_custom_log(self) -> None:
        log = EventLog(max_events=10)
        collector = ResolveCollector(log)
        collector.record_ignored("./+html.tsx", "html")
        assert collector.log is log
        assert len(log) == 1

    def test_record_skipped(self) -> None:
        collector = ResolveCollector()
        collector.record_skipped("./index.ios.tsx", "ios")
        (event,) = collector.log.recent()
        assert event == FileSkipped(
            path="./index.ios.tsx", platform="ios", timestamp_ns=event.timestamp_ns
        )

    def test_record_placed(self) -> None:
        collector = ResolveCollector()
        collector.record_placed(
            "./a.jsx", "a", kind="view", specificity=2, replaced="./a.tsx"
        )
        (event,) = collector.log.recent()
        assert isinstance(event, RoutePlaced)
        assert event.specificity == 2
        assert event.replaced == "./a.tsx"

    def test_record_synthetic(self) -> None:
        collector = ResolveCollector()
        collector.record_synthetic("./+not-found.tsx", "+not-found")
        (event,) = collector.log.recent()
        assert isinstance(event, SyntheticRouteAdded)

    def test_record_resolved(self) -> None:
        collector = ResolveCollector()
        collector.record_resolved(files=3, placements=2, routes=5, duration_ms=1.5)
        (event,) = collector.log.recent()
        assert isinstance(event, RoutesResolved)
        assert (event.files, event.placements, event.routes) == (3, 2, 5)


# ---------------------------------------------------------------------------
# Event dataclasses
# ---------------------------------------------------------------------------


class TestEventDataclasses:
    def test_frozen(self) -> None:
        event = _placed("./a.tsx")
        with pytest.raises(AttributeError):
            event.route = "b"  # type: ignore[misc]

    def test_now_ns_monotonic(self) -> None:
        a = now_ns()
        b = now_ns()
        assert b >= a
