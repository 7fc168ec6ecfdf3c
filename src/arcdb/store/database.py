"""SQLite database connection manager for arc-db."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.exceptions import ArcDBError, DatabaseError


class Database:
    """SQLite database connection manager.

    The connection runs in autocommit mode; multi-statement atomic work goes
    through `transaction()`, which takes the write lock up front so that
    concurrent processes serialize on it.

    Example:
        with Database(path) as db:
            with db.transaction() as cursor:
                cursor.execute("CREATE TABLE t (id INTEGER)")
    """

    def __init__(self, path: Path, timeout: float = 5.0, read_only: bool = False):
        """Initialize database with path.

        Args:
            path: Path to the SQLite database file.
            timeout: Seconds to wait for a lock held by another connection.
            read_only: Open an existing file without write access. The file
                and its directory are never created in this mode.
        """
        self.path = path
        self.timeout = timeout
        self.read_only = read_only
        self._connection: sqlite3.Connection | None = None

    def __enter__(self) -> "Database":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> None:
        """Open the database connection if it is not already open."""
        if self._connection is not None:
            return

        try:
            if self.read_only:
                target = self.path.resolve().as_uri() + "?mode=ro"
            else:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                target = str(self.path)
            self._connection = sqlite3.connect(
                target,
                timeout=self.timeout,
                isolation_level=None,
                uri=self.read_only,
            )
            self._connection.row_factory = sqlite3.Row
            self._connection.execute("PRAGMA foreign_keys = ON")
        except Exception as e:
            self._connection = None
            raise DatabaseError(f"Failed to connect to database: {e}") from e

        logger.debug(f"Connected to database: {self.path}")

    def close(self) -> None:
        """Close database connection."""
        if self._connection:
            try:
                self._connection.close()
            except Exception as e:
                raise DatabaseError(f"Failed to close database: {e}") from e
            finally:
                self._connection = None

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Context manager for an immediate (write-locked) transaction.

        Yields:
            A cursor for executing SQL statements.

        Raises:
            DatabaseError: If connection is not available or transaction fails.
                arc-db errors raised inside the block propagate unchanged
                after the rollback.
        """
        conn = self._require_connection()

        try:
            conn.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as e:
            raise DatabaseError(f"Failed to begin transaction: {e}") from e

        cursor = conn.cursor()
        try:
            yield cursor
            conn.execute("COMMIT")
        except ArcDBError:
            self._rollback(conn)
            raise
        except Exception as e:
            self._rollback(conn)
            raise DatabaseError(f"Transaction failed: {e}") from e
        finally:
            cursor.close()

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Execute a SQL query.

        Args:
            sql: SQL statement to execute.
            params: Parameters for the SQL statement.

        Returns:
            A cursor with the query results.

        Raises:
            DatabaseError: If connection is not available or query fails.
        """
        conn = self._require_connection()

        try:
            return conn.execute(sql, params)
        except Exception as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def table_exists(self, name: str) -> bool:
        """Check whether a table exists in the database."""
        cursor = self.execute(
            "SELECT count(*) FROM sqlite_master WHERE type = 'table' AND name = ?",
            (name,),
        )
        return cursor.fetchone()[0] > 0

    def sqlite_version(self) -> str:
        """Get the SQLite library version reported by the engine."""
        return self.execute("SELECT sqlite_version()").fetchone()[0]

    def _require_connection(self) -> sqlite3.Connection:
        if not self._connection:
            raise DatabaseError("Database not connected")
        return self._connection

    @staticmethod
    def _rollback(conn: sqlite3.Connection) -> None:
        if conn.in_transaction:
            conn.execute("ROLLBACK")
