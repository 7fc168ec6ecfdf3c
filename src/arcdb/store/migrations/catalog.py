"""Migration catalog for arc-db.

The catalog is the ordered, immutable set of migrations bundled with the
program. It is validated once when built: versions must be positive and
unique, and every migration needs at least one statement.
"""

from __future__ import annotations

import importlib
import pkgutil
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Iterable, Iterator

from loguru import logger

from ...core.exceptions import CatalogError

if TYPE_CHECKING:
    from types import ModuleType

VERSIONS_PACKAGE = "arcdb.store.migrations.versions"


@dataclass(frozen=True)
class Migration:
    """A versioned schema change."""

    version: int
    name: str
    statements: tuple[str, ...]

    def __repr__(self) -> str:
        return f"Migration({self.version}, {self.name!r})"


class MigrationCatalog:
    """Ordered, validated collection of migrations.

    Example:
        catalog = MigrationCatalog([
            Migration(1, "create_sessions", ("CREATE TABLE sessions (id TEXT)",)),
        ])
        for migration in catalog:
            print(migration.version, migration.name)
    """

    def __init__(self, migrations: Iterable[Migration]):
        """Validate and sort migrations.

        Args:
            migrations: Migration definitions in any order.

        Raises:
            CatalogError: If a version is duplicated or not a positive int,
                a name is not a non-empty string, or a migration has no
                statements.
        """
        seen: dict[int, Migration] = {}
        for migration in migrations:
            version = migration.version
            if isinstance(version, bool) or not isinstance(version, int) or version < 1:
                raise CatalogError(
                    f"Invalid migration version {version!r} for {migration.name!r}"
                )
            if not isinstance(migration.name, str) or not migration.name:
                raise CatalogError(
                    f"Invalid migration name {migration.name!r} for version {version}"
                )
            if not migration.statements:
                raise CatalogError(
                    f"Migration {migration.version} {migration.name!r} has no statements"
                )
            if migration.version in seen:
                raise CatalogError(
                    f"Duplicate migration version {migration.version}: "
                    f"{seen[migration.version].name!r} and {migration.name!r}"
                )
            seen[migration.version] = migration

        self._migrations = tuple(sorted(seen.values(), key=lambda m: m.version))

    @classmethod
    def discover(cls, package: str = VERSIONS_PACKAGE) -> "MigrationCatalog":
        """Build a catalog from the modules of a migrations package.

        Each module must define `VERSION` (int), `NAME` (str) and
        `STATEMENTS` (sequence of SQL strings).

        Args:
            package: Dotted name of the package holding migration modules.

        Raises:
            CatalogError: If a module is missing a required attribute, or the
                resulting catalog is invalid.
        """
        pkg = importlib.import_module(package)
        migrations = []

        for _, modname, ispkg in pkgutil.iter_modules(pkg.__path__):
            if ispkg:
                continue
            module = importlib.import_module(f"{package}.{modname}")
            migrations.append(_migration_from_module(module, modname))

        logger.debug(f"Discovered {len(migrations)} migration(s) in {package}")
        return cls(migrations)

    def list_all(self) -> list[Migration]:
        """Get all migrations, sorted ascending by version."""
        return list(self._migrations)

    def get(self, version: int) -> Migration | None:
        for migration in self._migrations:
            if migration.version == version:
                return migration
        return None

    def latest_version(self) -> int:
        """Get the highest version in the catalog, or 0 if it is empty."""
        if not self._migrations:
            return 0
        return self._migrations[-1].version

    def __iter__(self) -> Iterator[Migration]:
        return iter(self._migrations)

    def __len__(self) -> int:
        return len(self._migrations)


def _migration_from_module(module: "ModuleType", modname: str) -> Migration:
    missing = [attr for attr in ("VERSION", "NAME", "STATEMENTS") if not hasattr(module, attr)]
    if missing:
        raise CatalogError(
            f"Migration module {modname!r} is missing {', '.join(missing)}"
        )

    statements = module.STATEMENTS
    if isinstance(statements, str):
        statements = [statements]

    return Migration(
        version=module.VERSION,
        name=module.NAME,
        statements=tuple(statements),
    )


@lru_cache(maxsize=1)
def default_catalog() -> MigrationCatalog:
    """Get the catalog bundled with arc-db, built once per process."""
    return MigrationCatalog.discover()
