"""Arbor configuration.

ResolveOptions is the central configuration object, frozen after creation.
Ambient state (current platform, production mode) is resolved once by the
caller and passed in explicitly.
"""

import enum
import re
from dataclasses import dataclass, field

from arbor._errors import ConfigError
from arbor._types import Platform

# Platform identifiers recognised as file-name suffixes
VALID_PLATFORMS: frozenset[str] = frozenset({
    "android",
    "ios",
    "windows",
    "osx",
    "native",
    "web",
})

# The top-level HTML wrapper is never a route
_HTML_IGNORE = re.compile(r"^\./\+html\.[tj]sx?$")

# API routes are excluded unless explicitly preserved
_API_IGNORE = re.compile(r"\+api\.[tj]sx?$")


class LoadErrorPolicy(enum.Enum):
    """What a route loader does when the underlying module fails to load."""

    PROPAGATE = "propagate"
    EMPTY_MODULE = "empty_module"


@dataclass(frozen=True, slots=True)
class ResolveOptions:
    """Options for a single route resolution.

    Attributes:
        ignore: Extra exclusion patterns, matched with ``re.search`` against
            the raw context key. Strings are compiled on construction.
        preserve_api_routes: Keep ``+api`` files instead of ignoring them.
        ignore_require_errors: Swallow loader failures into an empty module.
        ignore_entry_points: Drop entry-point tracking from every node.
        unstable_platform_extensions: Enable ``.ios``/``.web``/... variants.
        unstable_strip_load_route: Drop loaders from the tree (tests only).
        unstable_always_include_sitemap: Add ``_sitemap`` even without views.
        unstable_improved_error_messages: Use the newer conflict wording.
        platform: The current platform (e.g., ``"ios"``).
        production: Permissive view conflicts: the later file wins.

    """

    ignore: tuple[re.Pattern[str], ...] = ()
    preserve_api_routes: bool = False
    ignore_require_errors: bool = False
    ignore_entry_points: bool = False
    unstable_platform_extensions: bool = False
    unstable_strip_load_route: bool = False
    unstable_always_include_sitemap: bool = False
    unstable_improved_error_messages: bool = False
    platform: Platform = "web"
    production: bool = False
    _ignore_patterns: tuple[re.Pattern[str], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.platform not in VALID_PLATFORMS:
            msg = (
                f"Unknown platform {self.platform!r}; "
                f"expected one of {', '.join(sorted(VALID_PLATFORMS))}"
            )
            raise ConfigError(msg)

        ignore = self.ignore
        if isinstance(ignore, str | re.Pattern):
            ignore = (ignore,)

        compiled: list[re.Pattern[str]] = []
        for pattern in ignore:
            if isinstance(pattern, re.Pattern):
                compiled.append(pattern)
                continue
            try:
                compiled.append(re.compile(pattern))
            except (re.error, TypeError) as exc:
                msg = f"Invalid ignore pattern {pattern!r}: {exc}"
                raise ConfigError(msg) from exc
        object.__setattr__(self, "ignore", tuple(compiled))

        patterns = [_HTML_IGNORE, *compiled]
        if not self.preserve_api_routes:
            patterns.append(_API_IGNORE)
        object.__setattr__(self, "_ignore_patterns", tuple(patterns))

    @property
    def ignore_patterns(self) -> tuple[re.Pattern[str], ...]:
        """Built-in and caller exclusion patterns, in matching order."""
        return self._ignore_patterns

    @property
    def load_error_policy(self) -> LoadErrorPolicy:
        """The loader failure policy captured by every route node."""
        if self.ignore_require_errors:
            return LoadErrorPolicy.EMPTY_MODULE
        return LoadErrorPolicy.PROPAGATE
