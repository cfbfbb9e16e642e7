# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines ALL MCP tools that the agent (or any MCP client) can call.  Each
#   tool is a thin wrapper around one DatabaseOperationService method: it
#   logs the call, delegates, and returns the rendered string verbatim.
#
# HOW IT WORKS (the flow):
#   1. The client calls a tool by name via MCP (e.g., "read_records")
#   2. FastMCP routes the call to the decorated function below
#   3. The function calls the core service, which opens the database,
#      runs the statement, closes the database, and returns a result
#   4. The result is flattened to ONE string: a message, a JSON array of
#      rows, or an "Error ..." message
#
# TOOL CATALOGUE:
#   Read-only:   db_info, list_tables, get_table_schema, read_records
#   Writes:      create_record
#   Destructive: update_records, delete_records, query
#   The flags travel to the client as MCP tool annotations so it can ask
#   for confirmation before running a destructive tool.
#
# ARGUMENT NAMES:
#   MCP argument names are part of the external contract (tableName,
#   columnValues, sqlQuery, ...), so the tool parameters use them as-is.
#
# RUNNING THIS SERVER:
#     a) Standalone:  SQLITE_DB_PATH=./data.db python -m tools.mcp_server
#     b) Launched by the ADK agent via stdio transport (agent/sqlite_agent.py)
# =============================================================================

import logging
import sys
from typing import Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core.models import OperationResult
from core.service import DatabaseOperationService
from core.settings import load_settings

load_dotenv()

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# Anything else written to stdout would corrupt the MCP JSON stream.
#
#   CYAN   → incoming requests (tool name + parameters)
#   YELLOW → intermediate status
#   GREEN  → responses
#   RED    → operations that came back as "Error ..."
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

# Long results (JSON record sets) are cut in the log line only.
_MAX_LOGGED_RESPONSE = 500

# INFO until main() applies the validated SQLITE_MCP_LOG_LEVEL.
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: OperationResult) -> str:
    """Log the rendered result (GREEN, or RED for failures), then return it."""
    text = result.render()
    shown = text if len(text) <= _MAX_LOGGED_RESPONSE else text[:_MAX_LOGGED_RESPONSE] + "…"
    color = _GREEN if result.ok else _RED
    logging.info(f"{color}  ← {tool_name} response: {shown!r}{_RESET}")
    return text


# =============================================================================
# Service wiring
# =============================================================================
# The service is built on first use from the environment.  Tests (and
# embedding code) can swap it with set_service().
# =============================================================================
_service: Optional[DatabaseOperationService] = None


def get_service() -> DatabaseOperationService:
    global _service
    if _service is None:
        _service = DatabaseOperationService.from_settings(load_settings())
        _log_status(f"Using database at {_service.database_path}")
    return _service


def set_service(service: Optional[DatabaseOperationService]) -> None:
    global _service
    _service = service


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("sqlite-mcp-server")

_READ_ONLY = {"readOnlyHint": True, "destructiveHint": False}
_WRITE = {"readOnlyHint": False, "destructiveHint": False}
_DESTRUCTIVE = {"readOnlyHint": False, "destructiveHint": True}


# =============================================================================
# TOOL 1: db_info
# =============================================================================
@mcp.tool(name="db_info", annotations=_READ_ONLY)
def db_info() -> str:
    """Get information about the SQLite database including path, existence, size, and table count.

    WHEN TO CALL THIS: First, to confirm which database file you are
    working with and whether it exists yet.

    Returns:
        Four lines: "Database Path", "Exists", "Size (bytes)", "Table Count".
    """
    _log_request("db_info")
    return _log_response("db_info", get_service().db_info())


# =============================================================================
# TOOL 2: list_tables
# =============================================================================
@mcp.tool(name="list_tables", annotations=_READ_ONLY)
def list_tables() -> str:
    """List all user tables in the SQLite database (excludes system tables).

    Returns:
        One table name per line, or "No tables found in the database."
    """
    _log_request("list_tables")
    return _log_response("list_tables", get_service().list_tables())


# =============================================================================
# TOOL 3: get_table_schema
# =============================================================================
@mcp.tool(name="get_table_schema", annotations=_READ_ONLY)
def get_table_schema(tableName: str) -> str:
    """Get the schema of a specified table in the SQLite database.

    WHEN TO CALL THIS: Before creating, reading with conditions, or
    updating records, so you know the exact column names and types.

    Args:
        tableName: Name of the table (letters, digits and underscores).

    Returns:
        A table of columns: CID | Name | Type | NotNull | DefaultValue | PK,
        or "Table '<name>' does not exist."
    """
    _log_request("get_table_schema", tableName=tableName)
    return _log_response("get_table_schema", get_service().get_table_schema(tableName))


# =============================================================================
# TOOL 4: create_record
# =============================================================================
@mcp.tool(name="create_record", annotations=_WRITE)
def create_record(tableName: str, columnValues: dict[str, Any]) -> str:
    """Create a new record in the specified table with given column values.

    Args:
        tableName: Table to insert into.
        columnValues: Mapping of column name → value for the new row.
            Only the listed columns are written; others take their defaults.

    Returns:
        A success message, or an error message starting with "Error".
    """
    _log_request("create_record", tableName=tableName, columnValues=columnValues)
    return _log_response("create_record", get_service().create_record(tableName, columnValues))


# =============================================================================
# TOOL 5: read_records
# =============================================================================
@mcp.tool(name="read_records", annotations=_READ_ONLY)
def read_records(
    tableName: str,
    conditions: Optional[str] = None,
    limit: int = 100,
    offset: int = 0,
) -> str:
    """Read records from a table with optional conditions, limit, and offset.

    Args:
        tableName: Table to read from.
        conditions: Optional SQL WHERE-clause body, used verbatim
            (e.g., "age > 30 AND city = 'Paris'").  Do not include "WHERE".
        limit: Maximum number of rows to return (default 100).
        offset: Number of rows to skip, for paging (default 0).

    Returns:
        A JSON array of row objects, e.g. [{"id":1,"name":"x"}].
    """
    _log_request("read_records", tableName=tableName, conditions=conditions, limit=limit, offset=offset)
    result = get_service().read_records(tableName, conditions, limit, offset)
    if result.ok:
        _log_status(f"Fetched {len(result.rows)} row(s)")
    return _log_response("read_records", result)


# =============================================================================
# TOOL 6: update_records
# =============================================================================
@mcp.tool(name="update_records", annotations=_DESTRUCTIVE)
def update_records(tableName: str, columnValues: dict[str, Any], conditions: str) -> str:
    """Update records in a table based on conditions with specified column values.

    WHEN TO CALL THIS: Only after confirming with the user which rows
    the conditions will match (read_records with the same conditions).

    Args:
        tableName: Table to update.
        columnValues: Mapping of column name → new value.
        conditions: Required SQL WHERE-clause body, used verbatim.

    Returns:
        "<n> record(s) successfully updated ..." or "No records updated ...".
    """
    _log_request("update_records", tableName=tableName, columnValues=columnValues, conditions=conditions)
    return _log_response(
        "update_records", get_service().update_records(tableName, columnValues, conditions)
    )


# =============================================================================
# TOOL 7: delete_records
# =============================================================================
@mcp.tool(name="delete_records", annotations=_DESTRUCTIVE)
def delete_records(tableName: str, conditions: str) -> str:
    """Delete records from a table based on conditions.

    Args:
        tableName: Table to delete from.
        conditions: Required SQL WHERE-clause body, used verbatim.

    Returns:
        "<n> record(s) successfully deleted ..." or "No records deleted ...".
    """
    _log_request("delete_records", tableName=tableName, conditions=conditions)
    return _log_response("delete_records", get_service().delete_records(tableName, conditions))


# =============================================================================
# TOOL 8: query
# =============================================================================
@mcp.tool(name="query", annotations=_DESTRUCTIVE)
def query(sqlQuery: str, parameters: Optional[dict[str, Any]] = None) -> str:
    """Execute a raw SQL query against the database with optional parameter values.

    Without `parameters` the text may contain several statements separated
    by semicolons; they all run and their changes are summed.  With
    `parameters` it must be a single statement using named placeholders
    (:name, @name or $name).  This tool reports the number of rows affected
    only; use read_records to fetch data.

    Args:
        sqlQuery: The SQL text to execute.
        parameters: Optional mapping of parameter name → value.

    Returns:
        "Query executed successfully. Rows affected: <n>."
    """
    _log_request("query", sqlQuery=sqlQuery, parameters=parameters)
    return _log_response("query", get_service().query(sqlQuery, parameters))


# =============================================================================
# Server entry point
# =============================================================================
# Settings are validated up front so a missing SQLITE_DB_PATH stops the
# server immediately instead of failing on the first tool call.
# =============================================================================
def main() -> None:
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)
    if settings.allow_raw_sql:
        logging.warning(
            "Raw SQL is ENABLED: conditions and sqlQuery are passed to SQLite verbatim "
            "(set SQLITE_MCP_ALLOW_RAW_SQL=false to disable)"
        )
    set_service(DatabaseOperationService.from_settings(settings))
    _log_status(f"Serving {settings.database_path}")
    mcp.run()


if __name__ == "__main__":
    main()
