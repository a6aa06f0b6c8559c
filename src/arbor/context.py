"""Module contexts — the file enumeration route resolution runs over.

A context lists virtual file paths (``./a/[id].tsx``) and loads the module
for one of them on demand::

    context = DirectoryContext(Path("app"))
    context.keys()            # ('./_layout.tsx', './index.tsx', ...)
    context("./index.tsx")    # {'__file__': ..., 'source': ...}
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from arbor._errors import RouteLoadError

if TYPE_CHECKING:
    from arbor._types import ContextKey, LoadedModule

# Script extensions the routing convention recognises
_ROUTE_FILE_RE = re.compile(r"\.[jt]sx?$")

# Directories never scanned for route files
_SKIP_DIRS = frozenset({"node_modules", "__pycache__"})


@runtime_checkable
class RequireContext(Protocol):
    """Enumerates route files and loads one module per key."""

    def keys(self) -> Iterable[ContextKey]: ...

    def __call__(self, key: ContextKey) -> LoadedModule: ...


type ModuleSource = LoadedModule | Callable[[], LoadedModule] | BaseException


class MemoryContext:
    """In-memory context built from a key -> module mapping.

    Values may be a module mapping, a zero-argument factory producing one,
    or an exception instance to raise when the key is loaded.  Keys are
    enumerated in insertion order.

    Args:
        modules: Key -> module source.  An iterable of keys maps each to
            an empty module.

    """

    __slots__ = ("_modules",)

    def __init__(self, modules: Mapping[ContextKey, ModuleSource] | Iterable[ContextKey]) -> None:
        if isinstance(modules, Mapping):
            self._modules: dict[ContextKey, ModuleSource] = dict(modules)
        else:
            self._modules = {key: {} for key in modules}

    def keys(self) -> tuple[ContextKey, ...]:
        return tuple(self._modules)

    def __call__(self, key: ContextKey) -> LoadedModule:
        try:
            source = self._modules[key]
        except KeyError:
            msg = f"No module registered for {key!r}"
            raise RouteLoadError(msg) from None

        if isinstance(source, BaseException):
            raise source
        if callable(source):
            return source()
        return source

    def __len__(self) -> int:
        return len(self._modules)


class DirectoryContext:
    """Context over the route files of a directory on disk.

    Keys are ``./``-prefixed POSIX paths relative to *root*, sorted.  Hidden
    files, hidden directories, ``node_modules`` and ``__pycache__`` are
    skipped.  Loading reads the file's source without executing it.

    Args:
        root: Directory containing the route files (e.g., ``app/``).

    """

    __slots__ = ("_root",)

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def keys(self) -> tuple[ContextKey, ...]:
        """Return all route file keys under the root, sorted.

        Returns an empty tuple when the root does not exist.
        """
        if not self._root.is_dir():
            return ()

        keys: list[str] = []
        for path in sorted(self._root.rglob("*")):
            if not path.is_file():
                continue
            relative = path.relative_to(self._root)
            if any(part.startswith(".") or part in _SKIP_DIRS for part in relative.parts):
                continue
            if not _ROUTE_FILE_RE.search(path.name):
                continue
            keys.append("./" + relative.as_posix())
        return tuple(keys)

    def path_for(self, key: ContextKey) -> Path:
        """Filesystem path of *key*."""
        return self._root / key.removeprefix("./")

    def __call__(self, key: ContextKey) -> LoadedModule:
        path = self.path_for(key)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Failed to read route module {path}: {exc}"
            raise RouteLoadError(msg) from exc
        return {"__file__": str(path), "source": source}
