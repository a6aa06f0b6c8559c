"""Route resolution entry point.

    context -> get_directory_tree -> sitemap / not-found -> hoist -> root

Resolution is synchronous and deterministic for a stable key order.  No
module is loaded; each node only records how to load its file later.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from arbor.config import ResolveOptions
from arbor.routes.hoist import hoist_routes_to_nearest_layout
from arbor.routes.tree import (
    append_not_found_route,
    append_sitemap_route,
    get_directory_tree,
)

if TYPE_CHECKING:
    from arbor.context import RequireContext
    from arbor.observability import ResolveCollector
    from arbor.routes.types import RouteNode


def get_routes(
    context: RequireContext,
    options: ResolveOptions | None = None,
    *,
    collector: ResolveCollector | None = None,
) -> RouteNode | None:
    """Resolve a module context into a single-rooted route tree.

    Args:
        context: File enumeration and deferred loader.
        options: Resolution options (defaults to ``ResolveOptions()``).
        collector: Optional event collector for diagnostics.

    Returns:
        The root layout node, or None when the context holds neither a
        layout nor a view.

    Raises:
        ResolveError: On conflicting files, invalid names, or platform
            variants without a fallback.  No partial tree is returned.

    """
    if options is None:
        options = ResolveOptions()

    t0 = time.perf_counter()
    tree = get_directory_tree(context, options, collector=collector)

    if not tree.has_layout and not tree.has_routes:
        _record_resolved(collector, context, tree.placements, None, t0)
        return None

    if tree.has_routes or options.unstable_always_include_sitemap:
        append_sitemap_route(tree.directory, options, collector=collector)

    append_not_found_route(tree.directory, options, collector=collector)

    root = hoist_routes_to_nearest_layout(tree.directory, options)
    _record_resolved(collector, context, tree.placements, root, t0)
    return root


def _record_resolved(
    collector: ResolveCollector | None,
    context: RequireContext,
    placements: int,
    root: RouteNode | None,
    t0: float,
) -> None:
    if collector is None:
        return
    collector.record_resolved(
        files=len(tuple(context.keys())),
        placements=placements,
        routes=sum(1 for _ in root.walk()) if root is not None else 0,
        duration_ms=(time.perf_counter() - t0) * 1000,
    )
