"""Configuration management for arc-db."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigError

DEFAULT_EXPORT_TABLES = (
    "sessions",
    "external_repos",
    "env_backups",
    "repo_dependencies",
)


def _default_db_path() -> Path:
    """Get default database path."""
    data_dir = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return data_dir / "arc" / "arc.db"


@dataclass
class Config:
    """Main application configuration."""

    db_path: Path = field(default_factory=_default_db_path)
    busy_timeout: float = 5.0  # seconds to wait on a locked database
    log_level: str = "WARNING"
    export_tables: tuple[str, ...] = DEFAULT_EXPORT_TABLES
    info_tables: tuple[str, ...] = ("schema_migrations",) + DEFAULT_EXPORT_TABLES

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ConfigError: If a numeric variable cannot be parsed.
        """
        config = cls()

        if path := os.environ.get("ARC_DB_PATH"):
            config.db_path = Path(path).expanduser()

        if timeout := os.environ.get("ARC_DB_BUSY_TIMEOUT"):
            try:
                config.busy_timeout = float(timeout)
            except ValueError as e:
                raise ConfigError(f"Invalid ARC_DB_BUSY_TIMEOUT: {timeout!r}") from e

        if level := os.environ.get("ARC_LOG_LEVEL"):
            config.log_level = level.upper()

        return config
