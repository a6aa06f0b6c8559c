"""Arbor CLI — arbor routes / arbor sitemap / arbor watch.

Entry point for the ``arbor`` command-line interface.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arbor.config import ResolveOptions
    from arbor.observability import ResolveCollector


def _add_resolve_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that resolves a directory."""
    parser.add_argument("root", nargs="?", default="app", help="App directory")
    parser.add_argument("--platform", default=None, help="Current platform (default: web)")
    parser.add_argument(
        "--platform-extensions", action="store_true",
        help="Enable platform-specific files (index.ios.tsx)",
    )
    parser.add_argument(
        "--production", action="store_true",
        help="Let later files win duplicate view slots instead of failing",
    )
    parser.add_argument(
        "--include-api", action="store_true", help="Keep +api route files",
    )
    parser.add_argument(
        "--always-sitemap", action="store_true",
        help="Add the generated sitemap even without routes",
    )
    parser.add_argument(
        "--ignore", action="append", default=None, metavar="REGEX",
        help="Extra ignore pattern (repeatable)",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the arbor CLI."""
    parser = argparse.ArgumentParser(
        prog="arbor",
        description="Resolve file-based routes into a navigation tree.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # arbor routes
    routes_parser = subparsers.add_parser(
        "routes",
        help="Print the resolved route tree",
    )
    _add_resolve_arguments(routes_parser)
    routes_parser.add_argument("--json", action="store_true", help="Print JSON")

    # arbor sitemap
    sitemap_parser = subparsers.add_parser(
        "sitemap",
        help="Print the hrefs of every route",
    )
    _add_resolve_arguments(sitemap_parser)

    # arbor watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Print the route tree again whenever route files change",
    )
    _add_resolve_arguments(watch_parser)

    return parser


def _get_version() -> str:
    """Get the package version."""
    from arbor import __version__

    return __version__


def _options_from_args(args: argparse.Namespace) -> ResolveOptions:
    """Merge arbor config in the app directory with CLI flags. CLI wins."""
    from arbor.config_loader import load_options

    overrides: dict[str, object] = {}
    if args.platform is not None:
        overrides["platform"] = args.platform
    if args.platform_extensions:
        overrides["unstable_platform_extensions"] = True
    if args.production:
        overrides["production"] = True
    if args.include_api:
        overrides["preserve_api_routes"] = True
    if args.always_sitemap:
        overrides["unstable_always_include_sitemap"] = True
    if args.ignore:
        overrides["ignore"] = tuple(args.ignore)
    return load_options(Path(args.root), **overrides)


def _print_routes(args: argparse.Namespace, options: ResolveOptions) -> None:
    from arbor.context import DirectoryContext
    from arbor.routes import format_tree, get_routes, tree_to_json

    root = get_routes(DirectoryContext(args.root), options)
    if getattr(args, "json", False):
        print(tree_to_json(root))
    else:
        print(format_tree(root))


def _print_sitemap(args: argparse.Namespace, options: ResolveOptions) -> None:
    from arbor.context import DirectoryContext
    from arbor.routes import get_routes
    from arbor.views import Sitemap

    root = get_routes(DirectoryContext(args.root), options)
    if root is None:
        print("  No routes found", file=sys.stderr)
        return
    for href in Sitemap(root).hrefs():
        print(href)


def _resolved_summary(collector: ResolveCollector) -> str:
    """One line describing the newest resolution in *collector*."""
    from arbor.observability import RoutesResolved

    for event in collector.log.query(event_type=RoutesResolved, limit=1):
        if isinstance(event, RoutesResolved):
            return f"  {event.routes} routes from {event.files} files in {event.duration_ms:.1f}ms"
    return ""


async def _watch(args: argparse.Namespace, options: ResolveOptions) -> None:
    from arbor._errors import ResolveError
    from arbor.observability import ResolveCollector
    from arbor.routes import format_tree
    from arbor.watcher import RouteWatcher

    collector = ResolveCollector()
    watcher = RouteWatcher(args.root, options, collector=collector)
    print(format_tree(watcher.resolve()))
    print(_resolved_summary(collector), file=sys.stderr)
    watcher.start()
    try:
        async for event in watcher.changes():
            print(f"\n  {event.kind}: {event.path.name} ({event.category})", file=sys.stderr)
            try:
                print(format_tree(watcher.apply(event)))
                print(_resolved_summary(collector), file=sys.stderr)
            except ResolveError as exc:
                print(f"error: {exc}", file=sys.stderr)
    finally:
        watcher.stop()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from arbor._errors import ArborError

    try:
        options = _options_from_args(args)
        if args.command == "routes":
            _print_routes(args, options)
        elif args.command == "sitemap":
            _print_sitemap(args, options)
        elif args.command == "watch":
            asyncio.run(_watch(args, options))
    except ArborError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
