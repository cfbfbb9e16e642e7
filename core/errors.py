# =============================================================================
# core/errors.py  —  Exceptions raised inside the core
# =============================================================================
#
# These never reach an MCP caller.  DatabaseOperationService catches them
# (together with sqlite3 errors) at the operation boundary and turns them into
# the operation's "Error ..." text.  They exist so the internals and the tests
# can tell failure kinds apart before that final conversion.
# =============================================================================


class SqliteToolError(Exception):
    """Base class for every error raised by the core package."""


class ConfigurationError(SqliteToolError):
    """Required configuration (e.g. SQLITE_DB_PATH) is missing or invalid."""


class InvalidIdentifierError(SqliteToolError, ValueError):
    """A table or column name cannot be safely interpolated into SQL."""

    def __init__(self, identifier: str, kind: str = "identifier"):
        self.identifier = identifier
        self.kind = kind
        super().__init__(
            f"Invalid {kind} name {identifier!r}: it must be a single word of letters, "
            f"digits or underscores that does not start with a digit"
        )


class MissingArgumentError(SqliteToolError, ValueError):
    """A required operation argument was empty or out of range."""


class RawSqlDisabledError(SqliteToolError):
    """Raw WHERE fragments / raw queries were supplied while disabled."""

    def __init__(self, what: str = "raw SQL"):
        super().__init__(
            f"{what} is disabled on this server (set SQLITE_MCP_ALLOW_RAW_SQL=true to enable)"
        )
