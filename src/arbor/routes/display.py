"""Text and JSON renderings of a resolved route tree.

    ./_layout.tsx  (root)
    |-- index  ./index.tsx
    |-- users  ./users/_layout.tsx
    |   `-- [id]  ./users/[id].tsx  dynamic=[id]
    `-- +not-found  ./+not-found.tsx  dynamic=[+not-found]  generated  internal
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arbor.routes.types import RouteNode


def format_tree(root: RouteNode | None) -> str:
    """Render *root* and its descendants as an ASCII tree."""
    if root is None:
        return "(no routes)"

    lines = [f"{root.context_key}  ({root.route or 'root'})"]

    def _walk(node: RouteNode, prefix: str) -> None:
        for idx, child in enumerate(node.children):
            is_last = idx == len(node.children) - 1
            branch = "`-- " if is_last else "|-- "
            lines.append(f"{prefix}{branch}{_describe(child)}")
            _walk(child, f"{prefix}{'    ' if is_last else '|   '}")

    _walk(root, "")
    return "\n".join(lines)


def tree_to_json(root: RouteNode | None, *, indent: int | None = 2) -> str:
    """Serialize *root* with the navigation runtime's field names."""
    return json.dumps(root.to_dict() if root is not None else None, indent=indent)


def _describe(node: RouteNode) -> str:
    parts = [node.route or "(root)", node.context_key]
    if node.dynamic:
        names = ",".join(
            f"...{d.name}" if d.deep and not d.not_found else d.name
            for d in node.dynamic
        )
        parts.append(f"dynamic=[{names}]")
    if node.generated:
        parts.append("generated")
    if node.internal:
        parts.append("internal")
    return "  ".join(parts)
