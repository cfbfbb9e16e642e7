# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains the Google ADK agent configuration.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer turns a natural-language question ("how many orders
#   shipped last week?") into tool calls against the SQLite tool server,
#   and turns the text results back into an answer.
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the SQL layer (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
# =============================================================================
