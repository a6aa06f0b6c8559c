"""Shared test fixtures for arbor."""

from __future__ import annotations

from pathlib import Path

import pytest

from arbor.config import ResolveOptions
from arbor.context import MemoryContext
from arbor.routes.types import RouteNode


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    """Create a small app directory with layouts, views and an API route.

    Returns the path to the app root.
    """
    app = tmp_path / "app"
    files = {
        "_layout.tsx": "export default Layout;\n",
        "index.tsx": "export default Home;\n",
        "+html.tsx": "export default Root;\n",
        "users/_layout.tsx": "export default UsersLayout;\n",
        "users/[id].tsx": "export default User;\n",
        "users/list+api.ts": "export function GET() {}\n",
        "(auth)/login.tsx": "export default Login;\n",
    }
    for name, content in files.items():
        path = app / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return app


def make_context(*keys: str) -> MemoryContext:
    """Build an in-memory context whose modules name their own key."""
    return MemoryContext({key: {"default": key} for key in keys})


def strip_options(**kwargs: object) -> ResolveOptions:
    """Options that drop loaders, as used for structural comparisons."""
    return ResolveOptions(unstable_strip_load_route=True, **kwargs)  # type: ignore[arg-type]


def routes_of(node: RouteNode) -> list[str]:
    """Child route names of *node*, in order."""
    return [child.route for child in node.children]


def find(node: RouteNode, context_key: str) -> RouteNode:
    """Return the first node in the tree with *context_key*."""
    for candidate in node.walk():
        if candidate.context_key == context_key:
            return candidate
    msg = f"{context_key} not in tree"
    raise AssertionError(msg)
