"""Bundled migration modules.

Each module in this package is one migration and must define:
    VERSION: int - Unique, positive version number
    NAME: str - Short descriptive name
    STATEMENTS: list[str] - SQL statements, executed in order

All statements of a migration run in a single transaction, so each entry
must be exactly one statement.
"""
