# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool wrappers.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and the core database
#   logic.  mcp_server.py:
#     1. Exposes one FastMCP tool per DatabaseOperationService method
#     2. Logs each request and response to stderr
#     3. Returns the service's rendered string, unchanged
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build SQL or touch sqlite3 (that's in core/)
#   - They do NOT decide what to run (that's the agent's job)
#   - They do NOT know about Google ADK
# =============================================================================
