"""Tests for configuration loading."""

from pathlib import Path

import pytest

from arcdb.core.config import DEFAULT_EXPORT_TABLES, Config
from arcdb.core.exceptions import ConfigError


class TestConfigDefaults:
    """Tests for default configuration values."""

    def test_default_db_path_uses_xdg_data_home(self, monkeypatch, tmp_path: Path):
        """Default path should live under XDG_DATA_HOME."""
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

        assert Config().db_path == tmp_path / "arc" / "arc.db"

    def test_default_db_path_falls_back_to_home(self, monkeypatch, tmp_path: Path):
        """Without XDG_DATA_HOME the path should be under ~/.local/share."""
        monkeypatch.delenv("XDG_DATA_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert Config().db_path == tmp_path / ".local" / "share" / "arc" / "arc.db"

    def test_info_tables_include_tracking_table(self):
        """info should count the tracking table before the data tables."""
        config = Config()

        assert config.info_tables[0] == "schema_migrations"
        assert config.info_tables[1:] == DEFAULT_EXPORT_TABLES


class TestConfigFromEnv:
    """Tests for Config.from_env()."""

    def test_db_path_override(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("ARC_DB_PATH", str(tmp_path / "custom.db"))

        assert Config.from_env().db_path == tmp_path / "custom.db"

    def test_busy_timeout_override(self, monkeypatch):
        monkeypatch.setenv("ARC_DB_BUSY_TIMEOUT", "12.5")

        assert Config.from_env().busy_timeout == 12.5

    def test_invalid_busy_timeout(self, monkeypatch):
        """A non-numeric timeout should raise ConfigError."""
        monkeypatch.setenv("ARC_DB_BUSY_TIMEOUT", "soon")

        with pytest.raises(ConfigError, match="ARC_DB_BUSY_TIMEOUT"):
            Config.from_env()

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("ARC_LOG_LEVEL", "debug")

        assert Config.from_env().log_level == "DEBUG"
