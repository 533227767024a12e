"""Tests for the reader configuration."""

import json

import pytest

from dxfparse.config import ConfigurationHandler, ReaderConfig
from dxfparse.diagnostics import DiagnosticKind


def _write_config(tmp_path, data):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(data), encoding="utf-8")
    return config_path


class TestReaderConfig:
    """Test ReaderConfig."""

    def test_defaults(self):
        """Test the default settings."""
        config = ReaderConfig()

        assert config.encoding == "utf-8-sig"
        assert config.encoding_errors == "replace"
        assert config.log_level == "WARNING"
        assert config.ignored_diagnostics == []

    def test_to_dict(self):
        """Test the JSON representation."""
        config = ReaderConfig(ignored_diagnostics=[DiagnosticKind.UNHANDLED_GROUP])

        assert config.to_dict()["IgnoredDiagnostics"] == ["UNHANDLED_GROUP"]


class TestConfigurationHandler:
    """Test ConfigurationHandler."""

    def test_load_config(self, tmp_path):
        """Test loading all settings."""
        config_path = _write_config(
            tmp_path,
            {
                "Encoding": "cp1252",
                "EncodingErrors": "strict",
                "LogLevel": "debug",
                "IgnoredDiagnostics": ["UNHANDLED_GROUP", "unknown_entity"],
            },
        )

        config = ConfigurationHandler(config_path).load_config()

        assert config.encoding == "cp1252"
        assert config.encoding_errors == "strict"
        assert config.log_level == "DEBUG"
        assert config.ignored_diagnostics == [DiagnosticKind.UNHANDLED_GROUP, DiagnosticKind.UNKNOWN_ENTITY]

    def test_missing_keys_keep_defaults(self, tmp_path):
        """Test that an empty configuration equals the defaults."""
        config = ConfigurationHandler(_write_config(tmp_path, {})).load_config()

        assert config == ReaderConfig()

    def test_unknown_values_are_ignored(self, tmp_path, caplog):
        """Test that unknown kinds and levels are logged and replaced."""
        config_path = _write_config(tmp_path, {"LogLevel": "LOUD", "IgnoredDiagnostics": ["NOT_A_KIND"]})

        config = ConfigurationHandler(config_path).load_config()

        assert config.log_level == "WARNING"
        assert config.ignored_diagnostics == []
        assert "Unknown diagnostic kind: NOT_A_KIND" in caplog.text
        assert "Unknown log level: LOUD" in caplog.text

    def test_missing_file(self, tmp_path):
        """Test that a missing configuration file raises."""
        handler = ConfigurationHandler(tmp_path / "missing.json")

        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            handler.load_config()

    def test_invalid_json(self, tmp_path):
        """Test that invalid JSON raises JSONDecodeError."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            ConfigurationHandler(config_path).load_config()
