"""Load ResolveOptions from arbor.yaml / arbor.toml if present.

Merges file config with keyword overrides. Overrides take precedence.
"""

from __future__ import annotations

from pathlib import Path

from arbor.config import ResolveOptions

CONFIG_FILENAMES: tuple[str, ...] = ("arbor.yaml", "arbor.yml", "arbor.toml")

_OPTION_KEYS = frozenset({
    "ignore",
    "preserve_api_routes",
    "ignore_require_errors",
    "ignore_entry_points",
    "unstable_platform_extensions",
    "unstable_strip_load_route",
    "unstable_always_include_sitemap",
    "unstable_improved_error_messages",
    "platform",
    "production",
})

# camelCase spellings used by JavaScript tooling configs
_ALIASES = {
    "preserveApiRoutes": "preserve_api_routes",
    "ignoreRequireErrors": "ignore_require_errors",
    "ignoreEntryPoints": "ignore_entry_points",
    "unstable_platformExtensions": "unstable_platform_extensions",
    "unstable_stripLoadRoute": "unstable_strip_load_route",
    "unstable_alwaysIncludeSitemap": "unstable_always_include_sitemap",
    "unstable_improvedErrorMessages": "unstable_improved_error_messages",
}


def load_options(root: Path, **overrides: object) -> ResolveOptions:
    """Load ResolveOptions from root, optionally merging arbor.yaml.

    Looks for arbor.yaml, arbor.yml, or arbor.toml in root. If found, loads
    and merges with overrides. Overrides take precedence.
    """
    file_config = _read_arbor_config(root)
    merged = {**file_config, **overrides}
    if "ignore" in merged:
        ignore = merged["ignore"]
        if isinstance(ignore, str):
            ignore = [ignore]
        merged["ignore"] = tuple(ignore)  # type: ignore[arg-type]
    return ResolveOptions(**merged)  # type: ignore[arg-type]


def _read_arbor_config(root: Path) -> dict[str, object]:
    """Read arbor config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("arbor.yaml", "arbor.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "arbor.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config. Returns empty dict on error."""
    import yaml

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return _flatten_arbor_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config. Returns empty dict on error."""
    import tomllib

    try:
        data = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return _flatten_arbor_section(data)


def _flatten_arbor_section(data: dict[str, object]) -> dict[str, object]:
    """Extract arbor.* and top-level option keys into one flat mapping."""
    result: dict[str, object] = {}
    for k, v in data.items():
        key = _ALIASES.get(k, k)
        if key in _OPTION_KEYS:
            result[key] = v
    arbor = data.get("arbor")
    if isinstance(arbor, dict):
        for k, v in arbor.items():
            key = _ALIASES.get(k, k)
            if key in _OPTION_KEYS:
                result[key] = v
    return result
