"""Shared type definitions for arbor."""

from collections.abc import Callable, Mapping
from typing import Literal

# Original file path from the module context (e.g., "./a/[id].tsx")
type ContextKey = str

# Route path relative to the nearest layout (e.g., "settings/[id]")
type RoutePath = str

# A loaded route module: export name -> value
type LoadedModule = Mapping[str, object]

# Deferred module accessor held by each route node
type LoadRoute = Callable[[], LoadedModule]

# Platform identifiers recognised as file-name suffixes
type Platform = Literal["android", "ios", "windows", "osx", "native", "web"]

# What kind of file a placement came from
type RouteKind = Literal["layout", "view"]
