"""Tests for JSONL export."""

import io
import json

import pytest

from arcdb.core.exceptions import ExportError
from arcdb.store.database import Database
from arcdb.store.export import export_table, export_tables, parse_table_list


@pytest.fixture
def populated_db(db: Database) -> Database:
    db.execute("CREATE TABLE sessions (id TEXT, started_at INTEGER, blob BLOB)")
    db.execute("INSERT INTO sessions VALUES ('s1', 100, X'68656C6C6F')")
    db.execute("INSERT INTO sessions VALUES ('s2', 200, NULL)")
    db.execute("CREATE TABLE external_repos (url TEXT)")
    db.execute("INSERT INTO external_repos VALUES ('https://example.com/r.git')")
    return db


class TestParseTableList:
    """Tests for parse_table_list()."""

    def test_splits_and_trims(self):
        assert parse_table_list(" a, b ,c") == ["a", "b", "c"]

    def test_drops_blank_entries(self):
        assert parse_table_list("a,, ,b,") == ["a", "b"]

    def test_empty_input(self):
        assert parse_table_list("") == []
        assert parse_table_list("   ") == []
        assert parse_table_list(None) == []


class TestExportTable:
    """Tests for export_table()."""

    def test_writes_one_line_per_row(self, populated_db: Database):
        """Each row becomes a JSON object with table, row and ts."""
        out = io.StringIO()

        rows = export_table(populated_db, "sessions", out)

        lines = [json.loads(line) for line in out.getvalue().splitlines()]
        assert rows == 2
        assert [line["table"] for line in lines] == ["sessions", "sessions"]
        assert lines[0]["row"] == {"id": "s1", "started_at": 100, "blob": "hello"}
        assert lines[1]["row"]["blob"] is None
        assert all(isinstance(line["ts"], int) for line in lines)

    def test_missing_table_is_skipped(self, db: Database):
        """A table that does not exist writes nothing."""
        out = io.StringIO()

        assert export_table(db, "nope", out) == 0
        assert out.getvalue() == ""

    def test_invalid_utf8_is_replaced(self, db: Database):
        """Undecodable bytes should not abort the export."""
        db.execute("CREATE TABLE raw (data BLOB)")
        db.execute("INSERT INTO raw VALUES (X'FF')")
        out = io.StringIO()

        export_table(db, "raw", out)

        assert json.loads(out.getvalue())["row"]["data"] == "�"

    def test_read_failure_raises_export_error(self, test_db_path):
        """A database that cannot be read should raise ExportError."""
        with pytest.raises(ExportError, match="export sessions"):
            export_table(Database(test_db_path), "sessions", io.StringIO())


class TestExportTables:
    """Tests for export_tables()."""

    def test_exports_in_order(self, populated_db: Database):
        """Tables should be written in the requested order."""
        out = io.StringIO()

        total = export_tables(populated_db, ["external_repos", "missing", "sessions"], out)

        tables = [json.loads(line)["table"] for line in out.getvalue().splitlines()]
        assert total == 3
        assert tables == ["external_repos", "sessions", "sessions"]
