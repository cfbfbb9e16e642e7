# =============================================================================
# core/settings.py  —  Environment-driven configuration
# =============================================================================
#
# All configuration comes from environment variables.  The entry points
# (tools/mcp_server.py and main.py) call python-dotenv's load_dotenv() first,
# so a local .env file works too.
#
#   SQLITE_DB_PATH            → path to the SQLite file (REQUIRED)
#   SQLITE_MCP_ALLOW_RAW_SQL  → "true"/"false": allow caller-supplied WHERE
#                               fragments and raw statements (default: true)
#   SQLITE_MCP_LOG_LEVEL      → logging level for the tool server (default: INFO)
#   SQLITE_AGENT_MODEL        → LiteLlm model string used by the agent
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.errors import ConfigurationError

DEFAULT_AGENT_MODEL = "openrouter/openai/gpt-4o"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Resolved runtime configuration for the tool server."""

    database_path: str
    allow_raw_sql: bool = True
    log_level: str = "INFO"
    agent_model: str = DEFAULT_AGENT_MODEL


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Parse a boolean environment value, falling back to default when unset."""
    if value is None or not value.strip():
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Expected a boolean value, got {value!r}")


def parse_log_level(value: Optional[str], default: str = "INFO") -> str:
    """Normalise a logging level name, falling back to default when unset."""
    if value is None or not value.strip():
        return default
    level = value.strip().upper()
    # getLevelName() maps known names to their int value and anything else
    # to the string "Level <name>".
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown log level {value!r} in SQLITE_MCP_LOG_LEVEL")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Raises:
        ConfigurationError: if SQLITE_DB_PATH is unset or empty, a flag
            has an unrecognised value, or the log level is not a logging
            level name.
    """
    env = os.environ if environ is None else environ

    database_path = (env.get("SQLITE_DB_PATH") or "").strip()
    if not database_path:
        raise ConfigurationError("Environment variable SQLITE_DB_PATH is not set.")

    return Settings(
        database_path=database_path,
        allow_raw_sql=parse_bool(env.get("SQLITE_MCP_ALLOW_RAW_SQL"), default=True),
        log_level=parse_log_level(env.get("SQLITE_MCP_LOG_LEVEL")),
        agent_model=(env.get("SQLITE_AGENT_MODEL") or DEFAULT_AGENT_MODEL).strip(),
    )
