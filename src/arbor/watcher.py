"""Route watcher — re-resolve the route tree when route files change.

Monitors an app directory for changes to route files and configuration.
Changes are categorized so callers can decide how much to redo:

- Layout or route file changed -> re-resolve the tree
- API route changed -> ignored by the tree unless API routes are preserved
- Config changed -> reload options, then re-resolve
"""

from __future__ import annotations

import asyncio
import re
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from watchfiles import Change

from arbor.config_loader import CONFIG_FILENAMES, load_options
from arbor.context import DirectoryContext
from arbor.routes.matchers import is_api_route
from arbor.routes.resolver import get_routes

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from arbor.config import ResolveOptions
    from arbor.observability import ResolveCollector
    from arbor.routes.types import RouteNode

type ChangeCategory = Literal["layout", "route", "api", "config"]

_ROUTE_FILE_RE = re.compile(r"\.[jt]sx?$")


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A file change detected by the watcher.

    Attributes:
        path: Absolute path to the changed file.
        kind: Type of filesystem change.
        category: What kind of file changed.

    """

    path: Path
    kind: Literal["created", "modified", "deleted"]
    category: ChangeCategory


# Mapping from watchfiles Change enum to our kind literals.
_CHANGE_KIND_MAP: dict[Change, Literal["created", "modified", "deleted"]] = {
    Change.added: "created",
    Change.modified: "modified",
    Change.deleted: "deleted",
}


def categorize_change(path: Path, root: Path) -> ChangeCategory | None:
    """Determine the category of a changed file based on its name.

    Returns None if the file is not a route file or arbor config.

    """
    try:
        rel = path.relative_to(root)
    except ValueError:
        return None

    parts = rel.parts
    if not parts:
        return None

    if len(parts) == 1 and parts[0] in CONFIG_FILENAMES:
        return "config"

    if any(part.startswith(".") for part in parts):
        return None
    if not _ROUTE_FILE_RE.search(path.name):
        return None

    if path.name.startswith("_layout."):
        return "layout"
    if is_api_route(path.name):
        return "api"
    return "route"


class RouteWatcher:
    """Watches an app directory and re-resolves routes on change.

    Uses watchfiles for efficient filesystem monitoring.  The watcher runs
    watchfiles in a background thread and bridges events to an asyncio
    queue for consumption by the caller.

    Args:
        root: App directory containing the route files.
        options: Fixed options.  When None, options are loaded from the
            directory's arbor config and reloaded on config changes.
        collector: Optional event collector passed to every resolution.

    """

    def __init__(
        self,
        root: str | Path,
        options: ResolveOptions | None = None,
        *,
        collector: ResolveCollector | None = None,
    ) -> None:
        self._root = Path(root).resolve()
        self._fixed_options = options
        self._options = options if options is not None else load_options(self._root)
        self._collector = collector
        self._queue: asyncio.Queue[ChangeEvent] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        # Events seen before changes() binds a loop
        self._pending: list[ChangeEvent] = []
        self._pending_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def root(self) -> Path:
        return self._root

    @property
    def options(self) -> ResolveOptions:
        return self._options

    @property
    def is_running(self) -> bool:
        """Whether the watcher background thread is active."""
        return self._thread is not None and self._thread.is_alive()

    def resolve(self) -> RouteNode | None:
        """Resolve the directory's current files into a route tree."""
        return get_routes(
            DirectoryContext(self._root), self._options, collector=self._collector
        )

    def apply(self, event: ChangeEvent) -> RouteNode | None:
        """Handle one change event and return the fresh tree."""
        if event.category == "config" and self._fixed_options is None:
            self._options = load_options(self._root)
        return self.resolve()

    def start(self) -> None:
        """Start watching for file changes in a background thread."""
        if self.is_running:
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._watch_loop,
            name="arbor-watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Signal the watcher to stop and wait for the thread to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

    async def changes(self) -> AsyncIterator[ChangeEvent]:
        """Async iterator that yields ChangeEvent objects as they occur.

        Blocks until a change is available or the watcher is stopped.  The
        watcher thread hands events to the loop running this iterator.

        """
        with self._pending_lock:
            self._loop = asyncio.get_running_loop()
            for event in self._pending:
                self._queue.put_nowait(event)
            self._pending.clear()

        while self.is_running or not self._queue.empty():
            try:
                event = await asyncio.wait_for(self._queue.get(), timeout=0.5)
                yield event
            except TimeoutError:
                if not self.is_running:
                    break

    def _watch_loop(self) -> None:
        """Background thread: run watchfiles and push events to the queue."""
        from watchfiles import watch

        for raw_changes in watch(
            self._root,
            stop_event=self._stop_event,
            debounce=300,
            step=100,
        ):
            for change_type, path_str in raw_changes:
                path = Path(path_str)
                category = categorize_change(path, self._root)
                if category is None:
                    continue

                kind = _CHANGE_KIND_MAP.get(change_type, "modified")
                self._deliver(ChangeEvent(path=path, kind=kind, category=category))

    def _deliver(self, event: ChangeEvent) -> None:
        """Hand *event* to the consuming loop from the watcher thread."""
        with self._pending_lock:
            loop = self._loop
            if loop is None or loop.is_closed():
                self._pending.append(event)
                return
            loop.call_soon_threadsafe(self._queue.put_nowait, event)
