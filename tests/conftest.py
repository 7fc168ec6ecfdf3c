"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from arcdb.store.database import Database
from arcdb.store.migrations import AppliedSetStore, Migration, MigrationCatalog


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def db(test_db_path: Path) -> Database:
    """Provide a connected database instance."""
    database = Database(test_db_path)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def store(db: Database) -> AppliedSetStore:
    """Provide an AppliedSetStore instance."""
    return AppliedSetStore(db)


@pytest.fixture
def three_step_catalog() -> MigrationCatalog:
    """Provide a small catalog of three independent migrations."""
    return MigrationCatalog(
        [
            Migration(1, "create_alpha", ("CREATE TABLE alpha (id INTEGER PRIMARY KEY)",)),
            Migration(
                2,
                "create_beta",
                (
                    "CREATE TABLE beta (id INTEGER PRIMARY KEY, label TEXT)",
                    "CREATE INDEX idx_beta_label ON beta(label)",
                ),
            ),
            Migration(3, "create_gamma", ("CREATE TABLE gamma (id INTEGER PRIMARY KEY)",)),
        ]
    )
