"""Tests for arbor.views — the modules behind generated routes."""

from __future__ import annotations

from pathlib import Path

from arbor.context import DirectoryContext
from arbor.routes.resolver import get_routes
from arbor.routes.tree import DEFAULT_LAYOUT_KEY
from arbor.views import (
    DefaultNavigator,
    Sitemap,
    Unmatched,
    get_nav_options,
    route_href,
)

from tests.conftest import find, make_context


class TestRouteHref:
    def test_plain(self) -> None:
        assert route_href(["", "users", "[id]"]) == "/users/[id]"

    def test_groups_removed(self) -> None:
        assert route_href(["", "(app)/settings"]) == "/settings"

    def test_trailing_index(self) -> None:
        assert route_href(["", "(tabs)", "index"]) == "/"

    def test_inner_index_kept(self) -> None:
        assert route_href(["index", "a"]) == "/index/a"

    def test_root(self) -> None:
        assert route_href([""]) == "/"


class TestSitemap:
    def test_hrefs(self, app_dir: Path) -> None:
        root = get_routes(DirectoryContext(app_dir))
        assert root is not None
        assert Sitemap(root).hrefs() == ["/", "/login", "/users/[id]"]

    def test_internal_routes_excluded(self, app_dir: Path) -> None:
        root = get_routes(DirectoryContext(app_dir))
        assert root is not None
        keys = [entry.context_key for entry in Sitemap(root).entries()]
        assert "./_sitemap.tsx" not in keys
        assert "./+not-found.tsx" not in keys

    def test_layout_entries(self, app_dir: Path) -> None:
        root = get_routes(DirectoryContext(app_dir))
        assert root is not None
        layouts = [e.href for e in Sitemap(root).entries() if e.is_layout]
        assert layouts == ["/", "/users"]

    def test_generated_root(self) -> None:
        root = get_routes(make_context("./index.tsx"))
        assert root is not None
        (layout,) = [e for e in Sitemap(root).entries() if e.is_layout]
        assert layout.generated
        assert layout.context_key == DEFAULT_LAYOUT_KEY

    def test_nav_options(self) -> None:
        assert get_nav_options()["title"] == "sitemap"


class TestDefaultNavigator:
    def test_screens(self) -> None:
        root = get_routes(make_context("./a.tsx", "./b.tsx"))
        assert root is not None
        module = root.load_route()  # type: ignore[misc]
        navigator = module["default"](root)
        assert isinstance(navigator, DefaultNavigator)
        assert navigator.screens == ["a", "b", "_sitemap", "+not-found"]


class TestUnmatched:
    def test_message(self) -> None:
        assert "/missing" in Unmatched("/missing").message

    def test_loaded_from_not_found_route(self) -> None:
        root = get_routes(make_context("./index.tsx"))
        assert root is not None
        module = find(root, "./+not-found.tsx").load_route()  # type: ignore[misc]
        assert module == {"default": Unmatched}
