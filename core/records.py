# =============================================================================
# core/records.py  —  Record CRUD and raw statement execution
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds and runs the INSERT / SELECT / UPDATE / DELETE statements behind
#   the CRUD tools, plus the raw "query" tool.
#
# SQL CONSTRUCTION POLICY:
#   - Table and column names are validated and quoted (core/identifiers.py)
#     and written into the statement text.
#   - VALUES are always bound as named parameters, keyed by column name
#     (:name).  A value is never formatted into SQL.
#   - `conditions` is a raw WHERE-clause body supplied by the caller.  It is
#     appended verbatim; the engine is the only thing that checks it.
#
# Each function takes an open connection and returns plain Python data
# (row counts, lists of dicts).  Messages and error text are built by the
# service layer.
# =============================================================================

import sqlite3
from typing import Any, Mapping, Optional

from core.errors import MissingArgumentError
from core.identifiers import quote_columns, quote_table, validate_identifier
from core.models import ColumnValueMap, Record

DEFAULT_LIMIT = 100
DEFAULT_OFFSET = 0

# Prefixes sqlite3 accepts in the statement for a named parameter.  Callers
# sometimes send the prefixed form as the dict key ("@id" instead of "id").
_PARAMETER_PREFIXES = ":@$"


def _require_values(column_values: Optional[ColumnValueMap]) -> ColumnValueMap:
    if not column_values:
        raise MissingArgumentError("no column values supplied")
    return column_values


def _require_conditions(conditions: Optional[str]) -> str:
    if conditions is None or not conditions.strip():
        raise MissingArgumentError("conditions are required")
    return conditions


def _bind_values(column_values: ColumnValueMap) -> dict[str, Any]:
    # Keys are already validated identifiers, so ":key" is a legal placeholder.
    return {validate_identifier(column, "column"): value for column, value in column_values.items()}


def build_insert(table_name: str, column_values: ColumnValueMap) -> tuple[str, dict[str, Any]]:
    """Return (sql, params) for inserting exactly the supplied columns."""
    values = _require_values(column_values)
    table = quote_table(table_name)
    columns = ", ".join(quote_columns(values.keys()))
    placeholders = ", ".join(f":{column}" for column in values.keys())
    sql = f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"
    return sql, _bind_values(values)


def build_select(
    table_name: str,
    conditions: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = DEFAULT_OFFSET,
) -> str:
    """Return the SELECT statement for read_records.

    limit/offset are coerced to int and must be >= 0.  SQLite reads a
    negative LIMIT as "no limit", which would break paging.
    """
    limit, offset = int(limit), int(offset)
    if limit < 0:
        raise MissingArgumentError(f"limit must be zero or greater, got {limit}")
    if offset < 0:
        raise MissingArgumentError(f"offset must be zero or greater, got {offset}")

    sql = f"SELECT * FROM {quote_table(table_name)}"
    if conditions is not None and conditions.strip():
        sql += f" WHERE {conditions}"
    sql += f" LIMIT {limit} OFFSET {offset}"
    return sql


def build_update(
    table_name: str, column_values: ColumnValueMap, conditions: str
) -> tuple[str, dict[str, Any]]:
    values = _require_values(column_values)
    where = _require_conditions(conditions)
    table = quote_table(table_name)
    assignments = ", ".join(
        f"{quoted} = :{column}" for quoted, column in zip(quote_columns(values.keys()), values.keys())
    )
    return f"UPDATE {table} SET {assignments} WHERE {where}", _bind_values(values)


def build_delete(table_name: str, conditions: str) -> str:
    where = _require_conditions(conditions)
    return f"DELETE FROM {quote_table(table_name)} WHERE {where}"


def normalize_parameters(parameters: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Strip a leading :, @ or $ from parameter names."""
    if not parameters:
        return {}
    return {str(name).lstrip(_PARAMETER_PREFIXES): value for name, value in parameters.items()}


# =============================================================================
# Execution
# =============================================================================

def insert_record(conn: sqlite3.Connection, table_name: str, column_values: ColumnValueMap) -> int:
    """Insert one row; returns the number of rows affected."""
    sql, params = build_insert(table_name, column_values)
    return conn.execute(sql, params).rowcount


def select_records(
    conn: sqlite3.Connection,
    table_name: str,
    conditions: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = DEFAULT_OFFSET,
) -> list[Record]:
    """Run the SELECT and map every row to {column: value} in result order."""
    cursor = conn.execute(build_select(table_name, conditions, limit, offset))
    column_names = [description[0] for description in cursor.description]
    return [dict(zip(column_names, row)) for row in cursor.fetchall()]


def update_records(
    conn: sqlite3.Connection, table_name: str, column_values: ColumnValueMap, conditions: str
) -> int:
    sql, params = build_update(table_name, column_values, conditions)
    return conn.execute(sql, params).rowcount


def delete_records(conn: sqlite3.Connection, table_name: str, conditions: str) -> int:
    return conn.execute(build_delete(table_name, conditions)).rowcount


def execute_statement(
    conn: sqlite3.Connection, sql_query: str, parameters: Optional[Mapping[str, Any]] = None
) -> int:
    """Run caller-supplied SQL verbatim; returns the total rows affected.

    Without parameters the text may hold several statements, all of which
    run in order.  With parameters it must be a single statement, since
    values can only be bound to one.  The count is taken from
    total_changes, so SELECT and DDL report 0.  Row data is never returned.
    """
    if sql_query is None or not sql_query.strip():
        raise MissingArgumentError("sqlQuery is required")
    before = conn.total_changes
    if parameters:
        conn.execute(sql_query, normalize_parameters(parameters))
    else:
        conn.executescript(sql_query)
    return conn.total_changes - before
