# =============================================================================
# core/introspection.py  —  Read-only questions about the database itself
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "what is in this database?": the tables it holds and the
#   columns of a table.  All three read from SQLite's own catalog
#   (sqlite_master) or from PRAGMA table_info; none touch user data.
#
# Each function takes an already-open connection.  Opening and closing it is
# the service's job (core/service.py).
# =============================================================================

import sqlite3

from core.identifiers import validate_identifier
from core.models import ColumnSchema, DatabaseInfo, TableSchema

# SQLite reserves the "sqlite_" prefix for its own tables (sqlite_sequence,
# sqlite_stat1, ...).  They are not user tables.
_LIST_USER_TABLES_SQL = (
    "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
)
_COUNT_TABLES_SQL = "SELECT count(name) FROM sqlite_master WHERE type='table'"


def count_tables(conn: sqlite3.Connection) -> int:
    """Count catalog entries of type 'table' (system tables included)."""
    (count,) = conn.execute(_COUNT_TABLES_SQL).fetchone()
    return int(count)


def build_database_info(conn: sqlite3.Connection, path: str, exists: bool, size_bytes: int) -> DatabaseInfo:
    return DatabaseInfo(
        path=path,
        exists=exists,
        size_bytes=size_bytes,
        table_count=count_tables(conn),
    )


def list_user_tables(conn: sqlite3.Connection) -> list[str]:
    """Names of user tables, in catalog order."""
    return [row[0] for row in conn.execute(_LIST_USER_TABLES_SQL)]


def read_table_schema(conn: sqlite3.Connection, table_name: str) -> TableSchema:
    """Describe a table's columns via PRAGMA table_info.

    A table that doesn't exist comes back with an empty column list
    (TableSchema.exists is False); the PRAGMA itself does not fail.
    """
    validate_identifier(table_name, "table")
    # PRAGMA arguments can't be bound; the name is validated above.
    rows = conn.execute(f"PRAGMA table_info('{table_name}')").fetchall()

    columns = [
        ColumnSchema(
            ordinal=int(cid),
            name=name,
            declared_type=declared_type or "",
            not_null=bool(not_null),
            default_value=None if default is None else str(default),
            primary_key_position=int(pk),
        )
        for cid, name, declared_type, not_null, default, pk in rows
    ]
    return TableSchema(table_name=table_name, columns=columns)
