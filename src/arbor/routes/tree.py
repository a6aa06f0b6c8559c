"""Directory tree building — the scan phase of route resolution.

Routes every file of a module context into a nested ``DirectoryNode``
structure keyed by path segment.  Each directory holds layout candidates
and named view candidates, one per specificity rank::

    ./_layout.tsx          root.layout[GENERIC]
    ./index.tsx            root.views["index"][GENERIC]
    ./index.ios.tsx        root.views["index"][PLATFORM]     (on ios)
    ./(a,b)/x.tsx          (a).views["(a)/x"], (b).views["(b)/x"]
    ./users/_layout.tsx    users.layout[GENERIC]

After the scan, ``append_sitemap_route`` and ``append_not_found_route``
inject the generated fallback views into the root directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from arbor._errors import ConflictError
from arbor.config import ResolveOptions
from arbor.routes.groups import extrapolate_groups
from arbor.routes.loader import RouteLoader
from arbor.routes.matchers import NOT_FOUND_SEGMENT
from arbor.routes.meta import get_file_meta, route_name_for
from arbor.routes.types import (
    CandidateSet,
    DirectoryNode,
    DynamicConvention,
    FileRecord,
    RouteNode,
    Specificity,
)
from arbor.views import (
    NAVIGATOR_ENTRY_POINT,
    SITEMAP_ENTRY_POINT,
    UNMATCHED_ENTRY_POINT,
    DefaultNavigator,
    Sitemap,
    Unmatched,
    get_nav_options,
)

if TYPE_CHECKING:
    from arbor._types import LoadRoute
    from arbor.context import RequireContext
    from arbor.observability import ResolveCollector
    from arbor.routes.meta import FileMeta

SITEMAP_ROUTE = "_sitemap"

DEFAULT_LAYOUT_KEY = "./_layout.tsx"
SITEMAP_KEY = "./_sitemap.tsx"
NOT_FOUND_KEY = "./+not-found.tsx"


@dataclass(slots=True)
class DirectoryTree:
    """Result of the scan phase.

    Attributes:
        directory: Root directory node.
        has_routes: At least one authored view was placed.
        has_layout: At least one authored layout was placed.
        placements: Number of placements made.

    """

    directory: DirectoryNode
    has_routes: bool = False
    has_layout: bool = False
    placements: int = 0


def get_directory_tree(
    context: RequireContext,
    options: ResolveOptions | None = None,
    *,
    collector: ResolveCollector | None = None,
) -> DirectoryTree:
    """Scan *context* into a directory tree.

    Files are processed in enumeration order.  A default root layout is
    synthesized when no authored root layout exists.

    Raises:
        ConflictError: Two layouts share a slot, or two views share a slot
            outside production mode.
        NamingError: A file name breaks the naming convention.

    """
    if options is None:
        options = ResolveOptions()

    tree = DirectoryTree(directory=DirectoryNode())
    policy = options.load_error_policy

    for file_path in context.keys():
        pattern = _matching_ignore_pattern(file_path, options)
        if pattern is not None:
            if collector is not None:
                collector.record_ignored(file_path, pattern)
            continue

        meta = get_file_meta(file_path, options)

        if meta.skipped:
            if collector is not None:
                collector.record_skipped(file_path, meta.platform or "")
            continue

        leaves: list[tuple[str, DirectoryNode]] = []
        for key in extrapolate_groups(meta.key):
            node = tree.directory
            for part in key.rpartition("/")[0].split("/"):
                if part:
                    node = node.child(part)
            leaves.append((route_name_for(key, meta), node))

        record = FileRecord(
            context_key=file_path,
            loader=RouteLoader.from_context(context, file_path, policy),
        )

        if meta.is_layout:
            tree.has_layout = tree.has_layout or bool(leaves)
            for name, leaf in leaves:
                _place_layout(leaf, _new_placement(record, name, options), meta)
                tree.placements += 1
                if collector is not None:
                    collector.record_placed(
                        file_path, name, kind="layout", specificity=meta.specificity
                    )
        elif meta.is_api:
            # API routes are not part of the navigation tree yet.
            continue
        else:
            tree.has_routes = tree.has_routes or bool(leaves)
            for name, leaf in leaves:
                replaced = _place_view(
                    leaf, _new_placement(record, name, options), meta, options
                )
                tree.placements += 1
                if collector is not None:
                    collector.record_placed(
                        file_path,
                        name,
                        kind="view",
                        specificity=meta.specificity,
                        replaced=replaced.context_key if replaced else None,
                    )

    if tree.directory.layout is None:
        tree.directory.layout = CandidateSet()
        tree.directory.layout.put(
            Specificity.GENERIC, _default_layout(options)
        )
        if collector is not None:
            collector.record_synthetic(DEFAULT_LAYOUT_KEY, "")

    return tree


def append_sitemap_route(
    directory: DirectoryNode,
    options: ResolveOptions | None = None,
    *,
    collector: ResolveCollector | None = None,
) -> bool:
    """Add the generated ``_sitemap`` view unless one exists.

    Returns True when a route was added.
    """
    if SITEMAP_ROUTE in directory.views:
        return False

    def load() -> dict[str, object]:
        return {"default": Sitemap, "get_nav_options": get_nav_options}

    node = _synthetic_node(SITEMAP_KEY, SITEMAP_ROUTE, load, SITEMAP_ENTRY_POINT, options)
    node.internal = True
    directory.views[SITEMAP_ROUTE] = _single(node)
    if collector is not None:
        collector.record_synthetic(SITEMAP_KEY, SITEMAP_ROUTE)
    return True


def append_not_found_route(
    directory: DirectoryNode,
    options: ResolveOptions | None = None,
    *,
    collector: ResolveCollector | None = None,
) -> bool:
    """Add the generated ``+not-found`` view unless one exists.

    Returns True when a route was added.
    """
    if NOT_FOUND_SEGMENT in directory.views:
        return False

    def load() -> dict[str, object]:
        return {"default": Unmatched}

    node = _synthetic_node(
        NOT_FOUND_KEY, NOT_FOUND_SEGMENT, load, UNMATCHED_ENTRY_POINT, options
    )
    node.internal = True
    node.dynamic = (DynamicConvention(name=NOT_FOUND_SEGMENT, deep=True, not_found=True),)
    directory.views[NOT_FOUND_SEGMENT] = _single(node)
    if collector is not None:
        collector.record_synthetic(NOT_FOUND_KEY, NOT_FOUND_SEGMENT)
    return True


# ---------------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------------


def _matching_ignore_pattern(file_path: str, options: ResolveOptions) -> str | None:
    for regex in options.ignore_patterns:
        if regex.search(file_path):
            return regex.pattern
    return None


def _new_placement(record: FileRecord, name: str, options: ResolveOptions) -> RouteNode:
    return RouteNode(
        record=record,
        route=name,
        entry_points=[record.context_key],
        strip_load_route=options.unstable_strip_load_route,
    )


def _place_layout(leaf: DirectoryNode, node: RouteNode, meta: FileMeta) -> None:
    if leaf.layout is None:
        leaf.layout = CandidateSet()

    existing = leaf.layout.get(meta.specificity)
    if existing is not None:
        msg = (
            f'The layouts "{node.context_key}" and {existing.context_key} conflict '
            f'in "{meta.dirname}. Please remove one of these files.'
        )
        raise ConflictError(
            msg,
            context_key=node.context_key,
            dirname=meta.dirname,
            conflicting_key=existing.context_key,
        )
    leaf.layout.put(meta.specificity, node)


def _place_view(
    leaf: DirectoryNode,
    node: RouteNode,
    meta: FileMeta,
    options: ResolveOptions,
) -> RouteNode | None:
    """Place a view and return the node it replaced (production mode only)."""
    candidates = leaf.views.get(node.route)
    if candidates is None:
        candidates = CandidateSet()
        leaf.views[node.route] = candidates

    if options.production:
        return candidates.put(meta.specificity, node)

    existing = candidates.get(meta.specificity)
    if existing is not None:
        if options.unstable_improved_error_messages:
            msg = (
                f'The routes "{node.context_key}" and {existing.context_key} conflict '
                f'in "{meta.dirname}. Please remove one of these files.'
            )
        else:
            msg = (
                "Multiple files match the route name "
                f'"./{meta.filepath_without_extensions}".'
            )
        raise ConflictError(
            msg,
            context_key=node.context_key,
            dirname=meta.dirname,
            conflicting_key=existing.context_key,
        )
    candidates.put(meta.specificity, node)
    return None


# ---------------------------------------------------------------------------
# Synthetic routes
# ---------------------------------------------------------------------------


def _default_layout(options: ResolveOptions) -> RouteNode:
    def load() -> dict[str, object]:
        return {"default": DefaultNavigator}

    return _synthetic_node(DEFAULT_LAYOUT_KEY, "", load, NAVIGATOR_ENTRY_POINT, options)


def _synthetic_node(
    context_key: str,
    route: str,
    load: LoadRoute,
    entry_point: str,
    options: ResolveOptions | None,
) -> RouteNode:
    strip = options.unstable_strip_load_route if options is not None else False
    return RouteNode(
        record=FileRecord(context_key=context_key, loader=RouteLoader(load, context_key)),
        route=route,
        entry_points=[entry_point],
        generated=True,
        strip_load_route=strip,
    )


def _single(node: RouteNode) -> CandidateSet:
    candidates = CandidateSet()
    candidates.put(Specificity.GENERIC, node)
    return candidates
