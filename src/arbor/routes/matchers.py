"""Name matchers for the file-based routing convention.

Segment conventions::

    [id]          dynamic segment        -> "id"
    [...rest]     catch-all segment      -> "rest"
    (group)       route group            -> "group"
    (a,b)         group array            -> "a,b"
    +not-found    not-found segment
"""

import re

NOT_FOUND_SEGMENT = "+not-found"

# [name]: no brackets, parentheses, dots, "?" or ":" inside
_DYNAMIC_RE = re.compile(r"^\[([^\[\]().?:]+?)\]$")

# [...name]
_DEEP_DYNAMIC_RE = re.compile(r"^\[\.\.\.([^/]+?)\]$")

# (group) in a path; groups never span a path separator or nest
_GROUP_RE = re.compile(r"\(([^\\/()]+)\)")

# Supported script extensions, with the optional +api marker
_EXTENSION_RE = re.compile(r"(\+api)?\.[jt]sx?$")

_API_RE = re.compile(r"\+api\.[jt]sx?$")


def match_dynamic_name(name: str) -> str | None:
    """Return the parameter name of a ``[name]`` segment."""
    match = _DYNAMIC_RE.match(name)
    return match.group(1) if match else None


def match_deep_dynamic_route_name(name: str) -> str | None:
    """Return the parameter name of a ``[...name]`` segment."""
    match = _DEEP_DYNAMIC_RE.match(name)
    return match.group(1) if match else None


def match_group_names(name: str) -> list[str]:
    """Return the contents of every ``(group)`` in *name*, in order."""
    return [match.group(1) for match in _GROUP_RE.finditer(name)]


def is_api_route(key: str) -> bool:
    """Whether *key* names an ``+api`` route file."""
    return _API_RE.search(key) is not None


def remove_supported_extensions(name: str) -> str:
    """Strip a script extension (and ``+api`` marker) from *name*.

    ``a/b.tsx`` -> ``a/b``, ``a/users+api.ts`` -> ``a/users``
    """
    return _EXTENSION_RE.sub("", name)
