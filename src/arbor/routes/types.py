"""Data models for route resolution.

``FileRecord`` and ``DynamicConvention`` are immutable.  ``RouteNode`` is a
single placement of a file in the tree: created during the directory scan,
rewritten in place by the hoister, and left alone once ``get_routes``
returns.  ``DirectoryNode`` and ``CandidateSet`` are builder-local.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from arbor._errors import FallbackRouteError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from arbor._types import ContextKey, RoutePath
    from arbor.routes.loader import RouteLoader


class Specificity(enum.IntEnum):
    """Rank used to choose among candidate files for one route slot.

    Higher ranks win.  ``SKIP`` marks a platform variant that does not
    apply to the current platform and never reaches the tree.
    """

    SKIP = -1
    GENERIC = 0
    NATIVE = 1
    PLATFORM = 2


@dataclass(frozen=True, slots=True)
class DynamicConvention:
    """A dynamic path segment.

    Attributes:
        name: Parameter name (``id`` for ``[id]``).
        deep: True for catch-all segments (``[...rest]``, ``+not-found``).
        not_found: True for the ``+not-found`` segment.

    """

    name: str
    deep: bool
    not_found: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "deep": self.deep}
        if self.not_found:
            data["notFound"] = True
        return data


@dataclass(frozen=True, slots=True)
class FileRecord:
    """Identity of one file, shared by every placement of that file.

    Attributes:
        context_key: The original file path from the module context.
        loader: Deferred accessor for the file's module.

    """

    context_key: ContextKey
    loader: RouteLoader


@dataclass(slots=True, eq=False)
class RouteNode:
    """A node in the resolved route tree.

    Attributes:
        record: Shared file identity (context key and loader).
        route: Path relative to the nearest layout ancestor.  Starts as the
            full normalized path and is stripped during hoisting.
        dynamic: Dynamic segments of ``route``, or None.
        children: Child nodes, populated by the hoister.
        entry_points: Files needed to render this node, ancestors first.
            None when entry-point tracking is disabled.
        generated: Synthetic node not backed by an authored file.
        internal: Synthetic node hidden from user navigation.
        strip_load_route: When True, ``load_route`` is unavailable.

    """

    record: FileRecord
    route: RoutePath
    dynamic: tuple[DynamicConvention, ...] | None = None
    children: list[RouteNode] = field(default_factory=list)
    entry_points: list[str] | None = None
    generated: bool = False
    internal: bool = False
    strip_load_route: bool = False

    @property
    def context_key(self) -> ContextKey:
        return self.record.context_key

    @property
    def load_route(self) -> RouteLoader | None:
        """The deferred module accessor, or None when stripped."""
        if self.strip_load_route:
            return None
        return self.record.loader

    def placement(self) -> RouteNode:
        """Return a new placement sharing this node's file record."""
        entry_points = None if self.entry_points is None else list(self.entry_points)
        return dataclasses.replace(self, children=[], entry_points=entry_points)

    def walk(self) -> Iterator[RouteNode]:
        """Yield this node and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view using the navigation runtime's field names."""
        data: dict[str, Any] = {
            "contextKey": self.context_key,
            "route": self.route,
            "dynamic": (
                [d.to_dict() for d in self.dynamic]
                if self.dynamic is not None
                else None
            ),
            "children": [child.to_dict() for child in self.children],
        }
        if self.entry_points is not None:
            data["entryPoints"] = list(self.entry_points)
        if self.generated:
            data["generated"] = True
        if self.internal:
            data["internal"] = True
        return data


class CandidateSet:
    """Candidate placements for one route slot, keyed by specificity.

    At most one node per rank.  The caller decides what an occupied rank
    means (conflict or replacement); ``put`` only reports the displaced node.
    """

    __slots__ = ("_by_rank",)

    def __init__(self) -> None:
        self._by_rank: dict[Specificity, RouteNode] = {}

    def get(self, rank: Specificity) -> RouteNode | None:
        return self._by_rank.get(rank)

    def put(self, rank: Specificity, node: RouteNode) -> RouteNode | None:
        """Store *node* at *rank* and return the node it replaced, if any."""
        existing = self._by_rank.get(rank)
        self._by_rank[rank] = node
        return existing

    def most_specific(self) -> RouteNode:
        """Return the candidate at the highest populated rank.

        Raises:
            FallbackRouteError: If the generic rank is empty while a
                platform-specific rank is populated.

        """
        if not self._by_rank:
            msg = "Cannot select a route from an empty candidate set"
            raise LookupError(msg)

        route = self._by_rank[max(self._by_rank)]
        if Specificity.GENERIC not in self._by_rank:
            msg = f"{route.context_key} does not contain a fallback platform route"
            raise FallbackRouteError(msg, context_key=route.context_key)
        return route

    def __contains__(self, rank: object) -> bool:
        return rank in self._by_rank

    def __bool__(self) -> bool:
        return bool(self._by_rank)

    def __len__(self) -> int:
        return len(self._by_rank)

    def __repr__(self) -> str:
        ranks = ", ".join(
            f"{rank.name}={node.context_key!r}"
            for rank, node in sorted(self._by_rank.items())
        )
        return f"CandidateSet({ranks})"


@dataclass(slots=True)
class DirectoryNode:
    """One directory level of the builder's intermediate tree.

    Attributes:
        layout: Layout candidates, or None when the directory has no layout.
        views: Route name -> view candidates, in discovery order.
        subdirectories: Path segment -> child directory, in discovery order.

    """

    layout: CandidateSet | None = None
    views: dict[str, CandidateSet] = field(default_factory=dict)
    subdirectories: dict[str, DirectoryNode] = field(default_factory=dict)

    def child(self, segment: str) -> DirectoryNode:
        """Return the subdirectory for *segment*, creating it if needed."""
        node = self.subdirectories.get(segment)
        if node is None:
            node = DirectoryNode()
            self.subdirectories[segment] = node
        return node
