"""Deferred route loading.

Each file gets one :class:`RouteLoader`, shared by every placement of that
file in the tree.  Resolution never calls it; the navigation runtime does,
later, through ``RouteNode.load_route``.

The failure policy is captured when the loader is created::

    PROPAGATE     -> failures raise RouteLoadError (original chained)
    EMPTY_MODULE  -> failures return {}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arbor._errors import RouteLoadError
from arbor.config import LoadErrorPolicy

if TYPE_CHECKING:
    from arbor._types import ContextKey, LoadedModule, LoadRoute
    from arbor.context import RequireContext


class RouteLoader:
    """Load one module from a module context on demand.

    Args:
        load: Zero-argument callable producing the module.
        context_key: File the module belongs to (for error messages).
        policy: What to do when *load* raises.

    """

    __slots__ = ("_context_key", "_load", "_policy")

    def __init__(
        self,
        load: LoadRoute,
        context_key: ContextKey,
        policy: LoadErrorPolicy = LoadErrorPolicy.PROPAGATE,
    ) -> None:
        self._load = load
        self._context_key = context_key
        self._policy = policy

    @classmethod
    def from_context(
        cls,
        context: RequireContext,
        context_key: ContextKey,
        policy: LoadErrorPolicy = LoadErrorPolicy.PROPAGATE,
    ) -> RouteLoader:
        """Build a loader that asks *context* for *context_key*."""
        return cls(lambda: context(context_key), context_key, policy)

    @property
    def context_key(self) -> ContextKey:
        return self._context_key

    @property
    def policy(self) -> LoadErrorPolicy:
        return self._policy

    def __call__(self) -> LoadedModule:
        if self._policy is LoadErrorPolicy.EMPTY_MODULE:
            try:
                return self._load()
            except Exception:
                return {}

        try:
            return self._load()
        except RouteLoadError:
            raise
        except Exception as exc:
            msg = f"Failed to load route module {self._context_key}: {exc}"
            raise RouteLoadError(msg) from exc

    def __repr__(self) -> str:
        return f"RouteLoader({self._context_key!r}, policy={self._policy.name})"
