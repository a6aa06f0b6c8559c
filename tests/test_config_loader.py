"""Tests for arbor.config_loader — arbor.yaml / arbor.toml loading."""

from pathlib import Path

import pytest

from arbor._errors import ConfigError
from arbor.config_loader import load_options


class TestLoadOptions:
    def test_no_config(self, tmp_path: Path) -> None:
        options = load_options(tmp_path)
        assert options.platform == "web"

    def test_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text(
            "platform: ios\nunstable_platform_extensions: true\n"
        )
        options = load_options(tmp_path)
        assert options.platform == "ios"
        assert options.unstable_platform_extensions is True

    def test_yml(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yml").write_text("production: true\n")
        assert load_options(tmp_path).production is True

    def test_toml_section(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.toml").write_text(
            '[arbor]\nplatform = "android"\nignore = ["drafts"]\n'
        )
        options = load_options(tmp_path)
        assert options.platform == "android"
        assert [p.pattern for p in options.ignore] == ["drafts"]

    def test_yaml_wins_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text("platform: ios\n")
        (tmp_path / "arbor.toml").write_text('platform = "android"\n')
        assert load_options(tmp_path).platform == "ios"

    def test_camel_case_aliases(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text(
            "preserveApiRoutes: true\nunstable_alwaysIncludeSitemap: true\n"
        )
        options = load_options(tmp_path)
        assert options.preserve_api_routes is True
        assert options.unstable_always_include_sitemap is True

    def test_single_ignore_string(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text("ignore: drafts\n")
        assert [p.pattern for p in load_options(tmp_path).ignore] == ["drafts"]

    def test_unknown_keys_dropped(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text("theme: dark\nplatform: osx\n")
        assert load_options(tmp_path).platform == "osx"

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text("platform: ios\n")
        assert load_options(tmp_path, platform="android").platform == "android"

    def test_malformed_yaml_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text("platform: [unclosed\n")
        assert load_options(tmp_path).platform == "web"

    def test_malformed_toml_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.toml").write_text("platform = \n")
        assert load_options(tmp_path).platform == "web"

    def test_non_mapping_yaml_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text("- a\n- b\n")
        assert load_options(tmp_path) == load_options(tmp_path / "missing")

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        (tmp_path / "arbor.yaml").write_text("platform: beos\n")
        with pytest.raises(ConfigError):
            load_options(tmp_path)
