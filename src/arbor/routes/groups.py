"""Route group expansion.

A group array places one file under several groups at once::

    (a,b)/x.tsx        -> (a)/x.tsx, (b)/x.tsx
    (a,b)/(c,d)/x.tsx  -> (a)/(c)/x.tsx, (a)/(d)/x.tsx, (b)/(c)/x.tsx, (b)/(d)/x.tsx
    (app)/x.tsx        -> (app)/x.tsx   (organizational, unchanged)
"""

from __future__ import annotations

from arbor._errors import NamingError
from arbor.routes.matchers import match_group_names


def extrapolate_groups(key: str, keys: dict[str, None] | None = None) -> list[str]:
    """Expand the group arrays in *key* into concrete paths.

    Single-member groups are left alone.  Results keep discovery order and
    contain no duplicates.

    Raises:
        NamingError: If one group array names the same group twice.

    """
    if keys is None:
        keys = {}

    for match in match_group_names(key):
        groups = match.split(",")
        if len(set(groups)) != len(groups):
            msg = (
                f'Array syntax cannot contain duplicate group name "{",".join(groups)}" '
                f'in "{key}".'
            )
            raise NamingError(msg, context_key=key)

        if len(groups) == 1:
            continue

        for group in groups:
            extrapolate_groups(key.replace(f"({match})", f"({group.strip()})", 1), keys)
        return list(keys)

    keys[key] = None
    return list(keys)
