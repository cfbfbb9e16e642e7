# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL database logic for the SQLite tool server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK, FastMCP, or any orchestration
#   framework.  Every module here is plain Python on top of the standard
#   sqlite3 driver, so it can be imported and tested without an MCP client.
#
# LAYOUT:
#   models.py        → result / schema dataclasses (the "nouns")
#   errors.py        → exception hierarchy used inside the core
#   settings.py      → environment-driven configuration
#   identifiers.py   → table/column name validation and quoting
#   database.py      → per-call connection handling
#   introspection.py → db_info, list_tables, get_table_schema
#   records.py       → create/read/update/delete and raw query
#   service.py       → DatabaseOperationService (the operation boundary)
# =============================================================================
