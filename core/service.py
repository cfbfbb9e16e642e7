# =============================================================================
# core/service.py  —  DatabaseOperationService (the operation boundary)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Exposes the eight database operations as methods of one class.  Every
#   method follows the same skeleton:
#
#     1. take the service lock (one operation at a time per service)
#     2. open a fresh connection              (core/database.py)
#     3. run the statement(s)                 (core/introspection.py, core/records.py)
#     4. close the connection, even on failure
#     5. return an OperationResult: message, rows, or failure
#
# ERROR POLICY:
#   Nothing raises past this class.  Any exception (sqlite3 errors, bad
#   identifiers, missing arguments, raw SQL disabled) is logged and turned
#   into the operation's "Error ...: <message>" text.  A statement that
#   matches zero rows is NOT an error; it gets its own success-shaped text.
# =============================================================================

import logging
import threading
from typing import Any, Callable, Mapping, Optional

from core import introspection, records
from core.database import file_facts, open_database
from core.errors import RawSqlDisabledError
from core.models import ColumnValueMap, OperationResult
from core.settings import Settings, load_settings

logger = logging.getLogger(__name__)


class DatabaseOperationService:
    """Named database operations over a single SQLite file.

    The service only remembers the file path and its settings.  Connections
    live for exactly one method call.
    """

    def __init__(self, database_path: str, allow_raw_sql: bool = True):
        self.database_path = database_path
        self.allow_raw_sql = allow_raw_sql
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "DatabaseOperationService":
        settings = settings or load_settings()
        return cls(settings.database_path, allow_raw_sql=settings.allow_raw_sql)

    # -------------------------------------------------------------------------
    # Shared skeleton
    # -------------------------------------------------------------------------
    def _run(
        self,
        operation: str,
        error_prefix: str,
        work: Callable[[Any], OperationResult],
    ) -> OperationResult:
        """Open → work(conn) → close, mapping any exception to a failure."""
        try:
            with self._lock, open_database(self.database_path) as conn:
                return work(conn)
        except Exception as exc:
            logger.warning("%s failed: %s", operation, exc)
            return OperationResult.failure(f"{error_prefix}: {exc}")

    def _check_raw_sql(self, what: str) -> None:
        if not self.allow_raw_sql:
            raise RawSqlDisabledError(what)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------
    def db_info(self) -> OperationResult:
        def work(conn):
            info = introspection.build_database_info(conn, self.database_path, exists, size)
            return OperationResult.success(info.render())

        try:
            # File facts are read BEFORE connecting: connecting creates the file.
            exists, size = file_facts(self.database_path)
        except OSError as exc:
            logger.warning("db_info failed: %s", exc)
            return OperationResult.failure(f"Error retrieving database info: {exc}")
        return self._run("db_info", "Error retrieving database info", work)

    def list_tables(self) -> OperationResult:
        def work(conn):
            tables = introspection.list_user_tables(conn)
            if not tables:
                return OperationResult.success("No tables found in the database.")
            return OperationResult.success("\n".join(tables))

        return self._run("list_tables", "Error listing tables", work)

    def get_table_schema(self, table_name: str) -> OperationResult:
        def work(conn):
            schema = introspection.read_table_schema(conn, table_name)
            if not schema.exists:
                return OperationResult.success(f"Table '{table_name}' does not exist.")
            return OperationResult.success(schema.render())

        return self._run(
            "get_table_schema",
            f"Error retrieving schema for table '{table_name}'",
            work,
        )

    # -------------------------------------------------------------------------
    # CRUD
    # -------------------------------------------------------------------------
    def create_record(self, table_name: str, column_values: ColumnValueMap) -> OperationResult:
        def work(conn):
            affected = records.insert_record(conn, table_name, column_values)
            if affected > 0:
                return OperationResult.success(f"Record successfully created in table '{table_name}'.")
            return OperationResult.success(f"Failed to create record in table '{table_name}'.")

        return self._run("create_record", f"Error creating record in table '{table_name}'", work)

    def read_records(
        self,
        table_name: str,
        conditions: Optional[str] = None,
        limit: int = records.DEFAULT_LIMIT,
        offset: int = records.DEFAULT_OFFSET,
    ) -> OperationResult:
        def work(conn):
            if conditions is not None and conditions.strip():
                self._check_raw_sql("Filtering with raw conditions")
            rows = records.select_records(conn, table_name, conditions, limit, offset)
            return OperationResult.records(rows)

        return self._run("read_records", f"Error reading records from table '{table_name}'", work)

    def update_records(
        self, table_name: str, column_values: ColumnValueMap, conditions: str
    ) -> OperationResult:
        def work(conn):
            self._check_raw_sql("Updating with raw conditions")
            affected = records.update_records(conn, table_name, column_values, conditions)
            if affected > 0:
                return OperationResult.success(
                    f"{affected} record(s) successfully updated in table '{table_name}'."
                )
            return OperationResult.success(f"No records updated in table '{table_name}'.")

        return self._run("update_records", f"Error updating records in table '{table_name}'", work)

    def delete_records(self, table_name: str, conditions: str) -> OperationResult:
        def work(conn):
            self._check_raw_sql("Deleting with raw conditions")
            affected = records.delete_records(conn, table_name, conditions)
            if affected > 0:
                return OperationResult.success(
                    f"{affected} record(s) successfully deleted from table '{table_name}'."
                )
            return OperationResult.success(f"No records deleted from table '{table_name}'.")

        return self._run("delete_records", f"Error deleting records from table '{table_name}'", work)

    # -------------------------------------------------------------------------
    # Raw query
    # -------------------------------------------------------------------------
    def query(self, sql_query: str, parameters: Optional[Mapping[str, Any]] = None) -> OperationResult:
        def work(conn):
            self._check_raw_sql("Raw query execution")
            affected = records.execute_statement(conn, sql_query, parameters)
            return OperationResult.success(f"Query executed successfully. Rows affected: {affected}.")

        return self._run("query", "Error executing query", work)
