"""File-based route resolution.

Turns a flat list of route files into a single-rooted route tree.

Public API::

    from arbor.routes import get_routes

    root = get_routes(DirectoryContext("app"), ResolveOptions(platform="ios"))
    for node in root.walk():
        print(node.route, node.context_key)
"""

from arbor.routes.display import format_tree, tree_to_json
from arbor.routes.dynamic import generate_dynamic
from arbor.routes.groups import extrapolate_groups
from arbor.routes.hoist import hoist_routes_to_nearest_layout
from arbor.routes.loader import RouteLoader
from arbor.routes.meta import FileMeta, get_file_meta
from arbor.routes.resolver import get_routes
from arbor.routes.tree import (
    DirectoryTree,
    append_not_found_route,
    append_sitemap_route,
    get_directory_tree,
)
from arbor.routes.types import (
    CandidateSet,
    DirectoryNode,
    DynamicConvention,
    FileRecord,
    RouteNode,
    Specificity,
)

__all__ = [
    "CandidateSet",
    "DirectoryNode",
    "DirectoryTree",
    "DynamicConvention",
    "FileMeta",
    "FileRecord",
    "RouteLoader",
    "RouteNode",
    "Specificity",
    "append_not_found_route",
    "append_sitemap_route",
    "extrapolate_groups",
    "format_tree",
    "generate_dynamic",
    "get_directory_tree",
    "get_file_meta",
    "get_routes",
    "hoist_routes_to_nearest_layout",
    "tree_to_json",
]
