"""Tests for configuration loading and validation."""

from pathlib import Path

import pytest
import yaml

from backup_retention.config.config_manager import ConfigManager, DEFAULT_CONFIG, RetentionConfig
from backup_retention.config.config_validator import ConfigValidator
from backup_retention.errors import ConfigError


def _write_config(tmp_path, data) -> str:
    path = tmp_path / "retention.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestConfigManager:
    """Test configuration loading."""

    def test_defaults_when_no_file_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [str(tmp_path / "absent.yaml")])

        manager = ConfigManager()
        config = manager.load_config()

        assert manager.config_file is None
        assert config == DEFAULT_CONFIG
        assert manager.build_retention_config().retention_days == 3

    def test_explicit_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(tmp_path / "nope.yaml")).load_config()

    def test_partial_file_merged_with_defaults(self, tmp_path):
        path = _write_config(tmp_path, {"retention": {"days": 10}, "paths": {"source_dir": "/srv/from"}})

        config = ConfigManager(path).build_retention_config()

        assert config.retention_days == 10
        assert config.source_dir == Path("/srv/from")
        assert config.destination_dir == Path(DEFAULT_CONFIG["paths"]["destination_dir"])

    def test_searches_default_locations(self, tmp_path, monkeypatch):
        path = _write_config(tmp_path, {"retention": {"days": 5}})
        monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [str(tmp_path / "x.yaml"), path])

        manager = ConfigManager()
        manager.load_config()

        assert manager.config_file == path
        assert manager.get_retention_config()["days"] == 5

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "retention.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigManager(str(path)).build_retention_config().retention_days == 3

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "retention.yaml"
        path.write_text("retention: [days: 3", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigManager(str(path)).load_config()

    def test_overrides(self, tmp_path):
        path = _write_config(tmp_path, {"retention": {"days": 10}})

        config = ConfigManager(path).build_retention_config(retention_days=0, metadata_file="other.json")

        assert config.retention_days == 0
        assert config.metadata_file == Path("other.json")

    def test_negative_override_rejected(self, tmp_path):
        path = _write_config(tmp_path, {})

        with pytest.raises(ConfigError):
            ConfigManager(path).build_retention_config(retention_days=-1)

    @pytest.mark.parametrize("days", [-1, True, "3", 1.5])
    def test_retention_config_rejects_invalid_days(self, tmp_path, days):
        with pytest.raises(ConfigError, match="Retention days"):
            RetentionConfig(
                metadata_file=tmp_path / "mock.json",
                source_dir=tmp_path / "from",
                destination_dir=tmp_path / "to",
                full_log=tmp_path / "full.log",
                copied_log=tmp_path / "copied.log",
                retention_days=days
            )

    def test_defaults_not_shared_between_managers(self, tmp_path, monkeypatch):
        monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_LOCATIONS", [])

        first = ConfigManager()
        first.load_config()
        first.config_data["retention"]["days"] = 99

        assert ConfigManager().load_config()["retention"]["days"] == 3


class TestConfigValidator:
    """Test configuration validation rules."""

    def test_valid(self):
        ConfigValidator().validate(DEFAULT_CONFIG)

    @pytest.mark.parametrize("days", [-1, "3", 2.5, True])
    def test_invalid_retention_days(self, days):
        with pytest.raises(ConfigError):
            ConfigValidator().validate({"retention": {"days": days}})

    def test_zero_days_allowed(self):
        ConfigValidator().validate({"retention": {"days": 0}})

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigError, match="paths"):
            ConfigValidator().validate({"paths": ["a", "b"]})

    def test_document_must_be_mapping(self):
        with pytest.raises(ConfigError):
            ConfigValidator().validate(["retention"])

    def test_unknown_path_setting(self):
        with pytest.raises(ConfigError, match="Unknown path setting"):
            ConfigValidator().validate({"paths": {"backup_dir": "/tmp"}})

    @pytest.mark.parametrize("value", ["", "   ", None, 3])
    def test_empty_path_rejected(self, value):
        with pytest.raises(ConfigError):
            ConfigValidator().validate({"paths": {"source_dir": value}})

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError, match="log level"):
            ConfigValidator().validate({"logging": {"level": "LOUD"}})

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ConfigValidator().validate({"retention": {"days": -5}})
