"""Tests for table counts and vacuum."""

from arcdb.core.types import TableCount
from arcdb.store.database import Database
from arcdb.store.maintenance import quote_identifier, table_counts, vacuum


class TestTableCounts:
    """Tests for table_counts()."""

    def test_counts_existing_tables_in_order(self, db: Database):
        """Counts should follow the requested order."""
        db.execute("CREATE TABLE b (id INTEGER)")
        db.execute("CREATE TABLE a (id INTEGER)")
        db.execute("INSERT INTO a VALUES (1), (2)")

        assert table_counts(db, ["b", "a"]) == [TableCount("b", 0), TableCount("a", 2)]

    def test_skips_missing_tables(self, db: Database):
        """Tables that do not exist should be left out."""
        db.execute("CREATE TABLE present (id INTEGER)")

        counts = table_counts(db, ["missing", "present"])

        assert [c.table for c in counts] == ["present"]

    def test_quote_identifier(self):
        """Embedded quotes should be doubled."""
        assert quote_identifier('we"ird') == '"we""ird"'


class TestVacuum:
    """Tests for vacuum()."""

    def test_vacuum_shrinks_file(self, db: Database):
        """VACUUM should reclaim pages freed by a dropped table."""
        db.execute("CREATE TABLE filler (data TEXT)")
        db.execute(
            "INSERT INTO filler SELECT hex(randomblob(1000)) "
            "FROM (WITH RECURSIVE n(i) AS (SELECT 1 UNION ALL SELECT i + 1 FROM n WHERE i < 200) "
            "SELECT i FROM n)"
        )
        db.execute("DROP TABLE filler")
        before = db.path.stat().st_size

        vacuum(db)

        assert db.path.stat().st_size < before
