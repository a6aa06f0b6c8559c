"""Tests for arbor.config."""

import re

import pytest

from arbor._errors import ConfigError
from arbor.config import LoadErrorPolicy, ResolveOptions


class TestResolveOptions:
    """ResolveOptions — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        options = ResolveOptions()
        assert options.ignore == ()
        assert options.preserve_api_routes is False
        assert options.ignore_require_errors is False
        assert options.ignore_entry_points is False
        assert options.unstable_platform_extensions is False
        assert options.unstable_strip_load_route is False
        assert options.unstable_always_include_sitemap is False
        assert options.unstable_improved_error_messages is False
        assert options.platform == "web"
        assert options.production is False

    def test_frozen(self) -> None:
        options = ResolveOptions()
        with pytest.raises(AttributeError):
            options.platform = "ios"  # type: ignore[misc]

    def test_unknown_platform(self) -> None:
        with pytest.raises(ConfigError, match="Unknown platform"):
            ResolveOptions(platform="beos")

    def test_string_patterns_compiled(self) -> None:
        options = ResolveOptions(ignore=("^\\./drafts/",))  # type: ignore[arg-type]
        assert options.ignore == (re.compile("^\\./drafts/"),)

    def test_compiled_patterns_kept(self) -> None:
        pattern = re.compile("x")
        assert ResolveOptions(ignore=(pattern,)).ignore[0] is pattern

    def test_single_string_pattern(self) -> None:
        options = ResolveOptions(ignore="^\\./drafts/")  # type: ignore[arg-type]
        assert options.ignore == (re.compile("^\\./drafts/"),)

    def test_single_compiled_pattern(self) -> None:
        pattern = re.compile("wip")
        assert ResolveOptions(ignore=pattern).ignore == (pattern,)  # type: ignore[arg-type]

    def test_invalid_pattern(self) -> None:
        with pytest.raises(ConfigError, match="Invalid ignore pattern"):
            ResolveOptions(ignore=("[",))  # type: ignore[arg-type]

    def test_equal_options(self) -> None:
        assert ResolveOptions(platform="ios") == ResolveOptions(platform="ios")


class TestIgnorePatterns:
    def _ignored(self, key: str, options: ResolveOptions) -> bool:
        return any(p.search(key) for p in options.ignore_patterns)

    def test_html_wrapper(self) -> None:
        options = ResolveOptions()
        assert self._ignored("./+html.tsx", options)
        assert not self._ignored("./a/+html.tsx", options)

    def test_api_routes(self) -> None:
        assert self._ignored("./users+api.ts", ResolveOptions())
        assert not self._ignored(
            "./users+api.ts", ResolveOptions(preserve_api_routes=True)
        )

    def test_caller_patterns_in_order(self) -> None:
        options = ResolveOptions(ignore=("drafts",))  # type: ignore[arg-type]
        patterns = [p.pattern for p in options.ignore_patterns]
        assert patterns[1] == "drafts"
        assert len(patterns) == 3


class TestLoadErrorPolicy:
    def test_propagate_by_default(self) -> None:
        assert ResolveOptions().load_error_policy is LoadErrorPolicy.PROPAGATE

    def test_empty_module(self) -> None:
        options = ResolveOptions(ignore_require_errors=True)
        assert options.load_error_policy is LoadErrorPolicy.EMPTY_MODULE
