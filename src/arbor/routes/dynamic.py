"""Dynamic segment detection for hoisted route paths."""

from __future__ import annotations

from arbor.routes.matchers import (
    NOT_FOUND_SEGMENT,
    match_deep_dynamic_route_name,
    match_dynamic_name,
)
from arbor.routes.types import DynamicConvention


def generate_dynamic(path: str) -> tuple[DynamicConvention, ...] | None:
    """Return the dynamic segments of *path*, in order, or None.

    ``a/[id]/[...rest]`` -> ``(id, deep=False), (rest, deep=True)``
    ``a/b``              -> ``None``
    """
    dynamic: list[DynamicConvention] = []
    for part in path.split("/"):
        if part == NOT_FOUND_SEGMENT:
            dynamic.append(
                DynamicConvention(name=NOT_FOUND_SEGMENT, deep=True, not_found=True)
            )
            continue

        deep_name = match_deep_dynamic_route_name(part)
        if deep_name is not None:
            dynamic.append(DynamicConvention(name=deep_name, deep=True))
            continue

        name = match_dynamic_name(part)
        if name is not None:
            dynamic.append(DynamicConvention(name=name, deep=False))

    return tuple(dynamic) or None
