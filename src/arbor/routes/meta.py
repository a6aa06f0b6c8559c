"""Filename parsing — turn one context key into route metadata.

    ./index.tsx               -> name "index",       GENERIC
    ./a/_layout.tsx           -> name "a",           layout
    ./a/[id].ios.tsx          -> name "a/[id]",      PLATFORM (on ios)
    ./a/users+api.ts          -> name "a/users",     api
    ./a/(group).tsx           -> NamingError
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from arbor._errors import NamingError
from arbor.config import VALID_PLATFORMS
from arbor.routes.matchers import is_api_route, remove_supported_extensions
from arbor.routes.types import Specificity

if TYPE_CHECKING:
    from arbor.config import ResolveOptions

_LAYOUT_PREFIX = "_layout."

_LAYOUT_SUFFIX_RE = re.compile(r"/?_layout$")


@dataclass(frozen=True, slots=True)
class FileMeta:
    """Route metadata parsed from a single file path.

    Attributes:
        key: The path without its leading ``./``.
        name: Logical route name (directory path for layouts).
        specificity: Platform rank, or ``Specificity.SKIP``.
        parts: Path segments of ``key``.
        dirname: Directory portion of ``key``.
        filename: Last segment of ``key``.
        is_layout: The file is a ``_layout`` file.
        is_api: The file is an ``+api`` route.
        filepath_without_extensions: ``key`` without its script extension.
        platform: Platform suffix stripped from the name, if any.

    """

    key: str
    name: str
    specificity: Specificity
    parts: tuple[str, ...]
    dirname: str
    filename: str
    is_layout: bool
    is_api: bool
    filepath_without_extensions: str
    platform: str | None = None

    @property
    def skipped(self) -> bool:
        return self.specificity is Specificity.SKIP


def get_file_meta(key: str, options: ResolveOptions) -> FileMeta:
    """Parse a context key into :class:`FileMeta`.

    Raises:
        NamingError: If the file name is wrapped in ``(group)`` syntax, or
            carries a platform suffix while platform extensions are off.

    """
    key = key.removeprefix("./")

    parts = tuple(key.split("/"))
    dirname = "/".join(parts[:-1])
    filename = parts[-1]
    filepath_without_extensions = remove_supported_extensions(key)
    filename_without_extensions = remove_supported_extensions(filename)
    is_layout = filename.startswith(_LAYOUT_PREFIX)
    is_api = is_api_route(key)

    if filename_without_extensions.startswith("(") and filename_without_extensions.endswith(")"):
        if options.unstable_improved_error_messages:
            msg = f"Invalid route ./{key}. Routes cannot end with `(group)` syntax"
        else:
            msg = (
                f"Using deprecated Layout Route format: Move `./app/{key}` to "
                f"`./app/{filepath_without_extensions}/_layout.js`"
            )
        raise NamingError(msg, context_key=f"./{key}", dirname=dirname)

    platform = filename_without_extensions.split(".")[-1]
    has_platform = platform in VALID_PLATFORMS

    specificity = Specificity.GENERIC
    if has_platform and options.unstable_platform_extensions:
        if platform == options.platform:
            specificity = Specificity.PLATFORM
        elif platform == "native" and options.platform != "web":
            specificity = Specificity.NATIVE
        else:
            specificity = Specificity.SKIP
    elif has_platform:
        msg = f"invalid route with platform extension: ./{key}"
        raise NamingError(msg, context_key=f"./{key}", dirname=dirname)
    else:
        platform = None

    return FileMeta(
        key=key,
        name=_route_name(filepath_without_extensions, platform, is_layout=is_layout),
        specificity=specificity,
        parts=parts,
        dirname=dirname,
        filename=filename,
        is_layout=is_layout,
        is_api=is_api,
        filepath_without_extensions=filepath_without_extensions,
        platform=platform,
    )


def route_name_for(key: str, meta: FileMeta) -> str:
    """Derive the route name for one group-expanded variant of *meta*.

    ``(a,b)/x.tsx`` expands to ``(a)/x.tsx`` and ``(b)/x.tsx``, named
    ``(a)/x`` and ``(b)/x``.
    """
    if key == meta.key:
        return meta.name
    return _route_name(
        remove_supported_extensions(key), meta.platform, is_layout=meta.is_layout
    )


def _route_name(path: str, platform: str | None, *, is_layout: bool) -> str:
    """Strip the platform suffix, then the ``_layout`` marker, from *path*."""
    if platform is not None:
        path = path.removesuffix(f".{platform}")
    if is_layout:
        path = _LAYOUT_SUFFIX_RE.sub("", path)
    return path
