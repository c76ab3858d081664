"""Tests for configuration file loader."""
from __future__ import annotations

from pathlib import Path

import pytest

from sca_report.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from sca_report.exceptions import ConfigurationError
from sca_report.models.config import ReporterConfig

RESOLUTIONS_YAML = (
    "resolutions:\n"
    "  issues:\n"
    "    - message: 'Timeout.*'\n"
    "      reason: SCANNER_ISSUE\n"
    "      comment: Flaky scanner\n"
)


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_finds_yaml_extension(self, tmp_path: Path) -> None:
        """Test that .yaml extension is found."""
        config_file = tmp_path / ".sca-report.yaml"
        config_file.write_text(RESOLUTIONS_YAML)

        result = find_config_file(tmp_path)
        assert result == config_file

    def test_finds_yml_extension(self, tmp_path: Path) -> None:
        """Test that .yml extension is found."""
        config_file = tmp_path / ".sca-report.yml"
        config_file.write_text(RESOLUTIONS_YAML)

        result = find_config_file(tmp_path)
        assert result == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Test that None is returned when no config file exists."""
        result = find_config_file(tmp_path)
        assert result is None

    def test_yaml_takes_precedence_over_yml(self, tmp_path: Path) -> None:
        """Test that .yaml file takes precedence over .yml."""
        yaml_file = tmp_path / ".sca-report.yaml"
        yml_file = tmp_path / ".sca-report.yml"
        yaml_file.write_text(RESOLUTIONS_YAML)
        yml_file.write_text(RESOLUTIONS_YAML)

        result = find_config_file(tmp_path)
        assert result == yaml_file

    def test_uses_cwd_when_no_start_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that current working directory is used when start_dir is None."""
        config_file = tmp_path / ".sca-report.yaml"
        config_file.write_text(RESOLUTIONS_YAML)
        monkeypatch.chdir(tmp_path)

        result = find_config_file()
        assert result == config_file


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_loads_resolutions(self, tmp_path: Path) -> None:
        """Test loading a configuration file with resolutions."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(RESOLUTIONS_YAML)

        result = load_config_file(config_file)
        assert isinstance(result, ReporterConfig)
        assert result.resolutions is not None
        assert result.resolutions.issues[0].reason == "SCANNER_ISSUE"
        assert result.resolutions.issues[0].comment == "Flaky scanner"

    def test_loads_how_to_fix_rules(self, tmp_path: Path) -> None:
        """Test loading remediation rules."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "how_to_fix:\n"
            "  - message: Timeout\n"
            "    text: Increase the scanner timeout.\n"
        )

        result = load_config_file(config_file)
        assert result.how_to_fix is not None
        assert result.how_to_fix[0].text == "Increase the scanner timeout."

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test that empty file returns default config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        result = load_config_file(config_file)
        assert result.resolutions is None
        assert result.how_to_fix is None

    def test_file_with_only_comments_returns_defaults(self, tmp_path: Path) -> None:
        """Test that file with only comments returns default config."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("# This is a comment\n# Another comment\n")

        result = load_config_file(config_file)
        assert result.resolutions is None

    def test_invalid_yaml_raises_error(self, tmp_path: Path) -> None:
        """Test that invalid YAML syntax raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("how_to_fix:\n  - message: x\n  invalid yaml here")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(config_file)
        assert "Invalid YAML syntax" in str(exc_info.value)
        assert str(config_file) in str(exc_info.value)

    def test_unknown_fields_raise_error(self, tmp_path: Path) -> None:
        """Test that unknown fields raise ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("unknown_field: value\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(config_file)
        assert "Invalid configuration" in str(exc_info.value)
        assert "unknown_field" in str(exc_info.value)

    def test_invalid_field_type_raises_error(self, tmp_path: Path) -> None:
        """Test that invalid field type raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("how_to_fix: not_a_list\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(config_file)
        assert "Invalid configuration" in str(exc_info.value)
        assert "how_to_fix" in str(exc_info.value)

    def test_non_dict_root_raises_error(self, tmp_path: Path) -> None:
        """Test that YAML with non-dict root raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- item1\n- item2\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(config_file)
        assert "expected a mapping at root level" in str(exc_info.value)

    def test_unreadable_path_raises_error(self, tmp_path: Path) -> None:
        """Test that a path that cannot be read raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(tmp_path)
        assert "Cannot read configuration file" in str(exc_info.value)

    def test_invalid_utf8_raises_error(self, tmp_path: Path) -> None:
        """Test that a file that is not UTF-8 encoded raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_file(config_file)
        assert "Cannot read configuration file" in str(exc_info.value)

    def test_loads_json_file(self, tmp_path: Path) -> None:
        """Test that configuration files ending in .json are read as JSON."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"how_to_fix": [{"message": "Timeout", "text": "Retry."}]}')

        result = load_config_file(config_file)
        assert result.how_to_fix is not None
        assert result.how_to_fix[0].text == "Retry."


class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_from_custom_path(self, tmp_path: Path) -> None:
        """Test loading from a custom config path."""
        config_file = tmp_path / "custom-config.yaml"
        config_file.write_text(RESOLUTIONS_YAML)

        result = load_config(str(config_file))
        assert result.resolutions is not None

    def test_auto_discovers_config_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test auto-discovery of config file in current directory."""
        config_file = tmp_path / ".sca-report.yaml"
        config_file.write_text(RESOLUTIONS_YAML)
        monkeypatch.chdir(tmp_path)

        result = load_config()
        assert result.resolutions is not None

    def test_returns_defaults_when_no_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that defaults are returned when no config file exists."""
        monkeypatch.chdir(tmp_path)

        result = load_config()
        assert result.resolutions is None
        assert result.how_to_fix is None

    def test_custom_path_overrides_discovery(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that custom path takes precedence over auto-discovery."""
        auto_config = tmp_path / ".sca-report.yaml"
        auto_config.write_text(RESOLUTIONS_YAML)

        custom_dir = tmp_path / "custom"
        custom_dir.mkdir()
        custom_config = custom_dir / "my-config.yaml"
        custom_config.write_text("how_to_fix: []\n")

        monkeypatch.chdir(tmp_path)

        result = load_config(str(custom_config))
        assert result.resolutions is None
        assert result.how_to_fix == []

    def test_invalid_discovered_config_raises_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that invalid discovered config raises ConfigurationError."""
        config_file = tmp_path / ".sca-report.yaml"
        config_file.write_text("unknown_field: value\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError):
            load_config()
