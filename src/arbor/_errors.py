"""Arbor error hierarchy.

All arbor-specific errors inherit from ArborError for easy catching.
Resolution errors are fatal: ``get_routes`` aborts on the first one and
never returns a partial tree.
"""


class ArborError(Exception):
    """Base error for all arbor operations."""


class ConfigError(ArborError):
    """Invalid or missing configuration."""


class ResolveError(ArborError):
    """A file set cannot be resolved into a route tree.

    Attributes:
        context_key: The file that triggered the error.
        dirname: Directory that owns the conflicting slot, if any.
        conflicting_key: The other file involved in a conflict, if any.

    """

    def __init__(
        self,
        message: str,
        *,
        context_key: str | None = None,
        dirname: str | None = None,
        conflicting_key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.context_key = context_key
        self.dirname = dirname
        self.conflicting_key = conflicting_key


class ConflictError(ResolveError):
    """Two files map to the same (directory, name, specificity) slot.

    Both files are always available as ``context_key`` (the file being
    placed) and ``conflicting_key`` (the file already in the slot), even
    when the message names only the route.
    """


class NamingError(ResolveError):
    """A file name breaks the routing naming convention."""


class FallbackRouteError(ResolveError):
    """Platform-specific routes exist without a generic fallback."""


class RouteLoadError(ArborError):
    """A deferred route module could not be loaded."""
