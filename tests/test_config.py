"""
Tests for the settings loader — discovery, parsing and validation.
"""

from pathlib import Path

import pytest

from jsongen.core.config.loader import ConfigError, find_settings_file, load_settings
from jsongen.core.models.settings import DEFAULT_MAX_OUTPUT_BYTES, Settings


class TestFindSettingsFile:
    def test_found_in_start_dir(self, tmp_path: Path):
        (tmp_path / "jsongen.yml").write_text("")
        assert find_settings_file(tmp_path) == tmp_path / "jsongen.yml"

    def test_walks_upward(self, tmp_path: Path):
        (tmp_path / "jsongen.yaml").write_text("")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_settings_file(deep) == tmp_path / "jsongen.yaml"

    def test_yml_preferred(self, tmp_path: Path):
        (tmp_path / "jsongen.yml").write_text("")
        (tmp_path / "jsongen.yaml").write_text("")
        assert find_settings_file(tmp_path).name == "jsongen.yml"

    def test_nearest_wins(self, tmp_path: Path):
        (tmp_path / "jsongen.yml").write_text("")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "jsongen.yml").write_text("")
        assert find_settings_file(inner) == inner / "jsongen.yml"


class TestLoadSettings:
    def test_defaults_without_file(self):
        settings = load_settings(search=False)
        assert settings == Settings()
        assert settings.generator.binary == "dart_json_gen"
        assert settings.generator.max_output_bytes == DEFAULT_MAX_OUTPUT_BYTES

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "jsongen.yml"
        path.write_text("")
        assert load_settings(path) == Settings()

    def test_partial_override(self, tmp_path: Path):
        path = tmp_path / "jsongen.yml"
        path.write_text(
            "verbose_output: true\n"
            "generator:\n"
            "  default_suffix: .g.dart\n"
            "  excluded_dirs: [gen]\n"
        )
        settings = load_settings(path)
        assert settings.verbose_output is True
        assert settings.show_notifications is True
        assert settings.generator.default_suffix == ".g.dart"
        assert settings.generator.excluded_dirs == ["gen"]
        assert settings.generator.config_key == "generated_extension"

    def test_searches_from_cwd(self, tmp_path: Path, monkeypatch):
        (tmp_path / "jsongen.yml").write_text("show_notifications: false\n")
        sub = tmp_path / "sub"
        sub.mkdir()
        monkeypatch.chdir(sub)
        assert load_settings().show_notifications is False

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "jsongen.yml"
        path.write_text("generator: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "jsongen.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(path)

    def test_rejects_bad_output_limit(self, tmp_path: Path):
        path = tmp_path / "jsongen.yml"
        path.write_text("generator:\n  max_output_bytes: -1\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)

    def test_rejects_blank_suffix(self, tmp_path: Path):
        path = tmp_path / "jsongen.yml"
        path.write_text("generator:\n  default_suffix: '  '\n")
        with pytest.raises(ConfigError):
            load_settings(path)
