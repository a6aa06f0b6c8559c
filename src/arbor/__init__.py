"""Arbor — file-based route resolution for navigation runtimes.

Turns a flat enumeration of route files into a single-rooted tree of
layouts and views.  Layouts wrap everything beneath them; views become
children of their nearest layout with routes rewritten relative to it.

Quick start::

    import arbor

    root = arbor.get_routes(arbor.DirectoryContext("app"))

File conventions::

    _layout.tsx       layout for its directory
    index.tsx         view
    [id].tsx          dynamic segment
    [...rest].tsx     catch-all segment
    (group)/          organizational group
    (a,b)/            group array: one placement per group
    index.ios.tsx     platform variant (with platform extensions)
    users+api.ts      API route (ignored unless preserved)
    +not-found.tsx    unmatched-route screen
    +html.tsx         HTML wrapper, never a route

"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arbor.config import ResolveOptions
    from arbor.context import DirectoryContext, MemoryContext
    from arbor.routes import RouteNode, get_routes

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "DirectoryContext",
    "MemoryContext",
    "ResolveOptions",
    "RouteNode",
    "__version__",
    "get_routes",
    "load_options",
]

_LAZY = {
    "ResolveOptions": ("arbor.config", "ResolveOptions"),
    "load_options": ("arbor.config_loader", "load_options"),
    "DirectoryContext": ("arbor.context", "DirectoryContext"),
    "MemoryContext": ("arbor.context", "MemoryContext"),
    "RouteNode": ("arbor.routes.types", "RouteNode"),
    "get_routes": ("arbor.routes.resolver", "get_routes"),
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import arbor`` fast while providing a clean top-level API.
    """
    if name in _LAZY:
        import importlib

        module_name, attr = _LAZY[name]
        return getattr(importlib.import_module(module_name), attr)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
