"""Hoisting — flatten a directory tree into a tree of layouts and views.

Every view becomes a child of its nearest enclosing layout, and every
layout a child of the layout above it.  Routes are rewritten relative to
that layout as the walk descends::

    _layout.tsx            ""          (root)
    a/_layout.tsx          "a"         child of root
    a/b.tsx                "b"         child of a, not "a/b"
    a/c/d.tsx              "c/d"       child of a

Walk order is layout, then views, then subdirectories, each in discovery
order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arbor.config import ResolveOptions
from arbor.routes.dynamic import generate_dynamic

if TYPE_CHECKING:
    from collections.abc import Sequence

    from arbor.routes.types import DirectoryNode, RouteNode


def hoist_routes_to_nearest_layout(
    directory: DirectoryNode,
    options: ResolveOptions | None = None,
    parent: RouteNode | None = None,
    entry_points: Sequence[str] = (),
    path_to_remove: str = "",
) -> RouteNode | None:
    """Attach *directory*'s routes to the nearest layout and recurse.

    Args:
        directory: Directory to hoist.
        options: Resolution options (entry-point and loader stripping).
        parent: Nearest layout above *directory*, if any.
        entry_points: Entry points inherited from ancestor layouts.
        path_to_remove: Route prefix of the nearest layout, with a trailing
            slash (empty at the root).

    Returns:
        The layout that owns this directory's routes, or None when there
        is no layout at all.

    Raises:
        FallbackRouteError: A slot has platform variants but no generic file.

    """
    if options is None:
        options = ResolveOptions()

    entry_points = list(entry_points)

    if directory.layout:
        layout = directory.layout.most_specific()
        if parent is not None:
            parent.children.append(layout)

        parent = layout
        new_route = _strip_prefix(parent.route, path_to_remove)
        path_to_remove = f"{parent.route}/" if parent.route else ""
        parent.route = new_route
        parent.dynamic = generate_dynamic(parent.route)

        if parent.entry_points:
            entry_points = [*entry_points, *parent.entry_points]
        # Layout entry points flow to descendants only.
        parent.entry_points = None

    if parent is None:
        return None

    for candidates in directory.views.values():
        route = candidates.most_specific()
        child = route.placement()
        child.route = _strip_prefix(route.route, path_to_remove)
        child.dynamic = generate_dynamic(child.route)
        if options.ignore_entry_points:
            child.entry_points = None
        else:
            child.entry_points = list(dict.fromkeys([*entry_points, *(route.entry_points or ())]))
        parent.children.append(child)

    for subdirectory in directory.subdirectories.values():
        hoist_routes_to_nearest_layout(
            subdirectory, options, parent, entry_points, path_to_remove
        )

    return parent


def _strip_prefix(route: str, prefix: str) -> str:
    return route.removeprefix(prefix) if prefix else route
