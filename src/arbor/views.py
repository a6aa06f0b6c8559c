"""Built-in route modules backing the generated routes.

These are what the loaders of synthetic nodes return:

    ./_layout.tsx     -> {"default": DefaultNavigator}
    ./_sitemap.tsx    -> {"default": Sitemap, "get_nav_options": get_nav_options}
    ./+not-found.tsx  -> {"default": Unmatched}

They describe screens for a navigation runtime; nothing here renders.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from arbor.routes.types import RouteNode

NAVIGATOR_ENTRY_POINT = "arbor/views/navigator"
SITEMAP_ENTRY_POINT = "arbor/views/sitemap"
UNMATCHED_ENTRY_POINT = "arbor/views/unmatched"

_GROUP_SEGMENT_RE = re.compile(r"^\(.+\)$")


class DefaultNavigator:
    """Navigator used when the app has no root ``_layout`` file.

    Lists the screens of its layout node in tree order.
    """

    __slots__ = ("_node",)

    def __init__(self, node: RouteNode) -> None:
        self._node = node

    @property
    def screens(self) -> list[str]:
        return [child.route for child in self._node.children]

    def __repr__(self) -> str:
        return f"DefaultNavigator(screens={self.screens!r})"


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One route listed by the sitemap.

    Attributes:
        href: URL path with groups removed (e.g., ``/users/[id]``).
        context_key: File the route comes from.
        generated: The route is synthetic.
        is_layout: The route is a layout.

    """

    href: str
    context_key: str
    generated: bool
    is_layout: bool


class Sitemap:
    """Flat listing of every user-visible route in a resolved tree."""

    __slots__ = ("_root",)

    def __init__(self, root: RouteNode) -> None:
        self._root = root

    def entries(self) -> list[SitemapEntry]:
        """Return sitemap entries sorted by href, internal routes excluded."""
        entries: list[SitemapEntry] = []
        _collect(self._root, [], entries)
        return sorted(entries, key=lambda e: (e.href, e.context_key))

    def hrefs(self) -> list[str]:
        """Unique hrefs of all non-layout entries, sorted."""
        return sorted({e.href for e in self.entries() if not e.is_layout})


def get_nav_options() -> dict[str, Any]:
    """Screen options for the sitemap route."""
    return {
        "title": "sitemap",
        "presentation": "card",
        "header_shown": True,
    }


class Unmatched:
    """Screen shown when no route matches a pathname."""

    __slots__ = ("pathname",)

    def __init__(self, pathname: str) -> None:
        self.pathname = pathname

    @property
    def message(self) -> str:
        return f"Unmatched Route: page could not be found for {self.pathname!r}"

    def __repr__(self) -> str:
        return f"Unmatched({self.pathname!r})"


def route_href(segments: list[str]) -> str:
    """Join route segments into an href, dropping groups and ``index``.

    ``["(app)", "users", "[id]"]`` -> ``/users/[id]``
    ``["(tabs)", "index"]``        -> ``/``
    """
    parts = [
        segment
        for route in segments
        for segment in route.split("/")
        if segment and not _GROUP_SEGMENT_RE.match(segment)
    ]
    if parts and parts[-1] == "index":
        parts.pop()
    return "/" + "/".join(parts)


def _collect(node: RouteNode, parents: list[str], entries: list[SitemapEntry]) -> None:
    segments = [*parents, node.route]
    if not node.internal:
        entries.append(SitemapEntry(
            href=route_href(segments),
            context_key=node.context_key,
            generated=node.generated,
            is_layout=_is_layout(node),
        ))
    for child in node.children:
        _collect(child, segments, entries)


def _is_layout(node: RouteNode) -> bool:
    filename = node.context_key.rsplit("/", 1)[-1]
    return filename.startswith("_layout.")
