# =============================================================================
# agent/sqlite_agent.py  —  Google ADK Agent Configuration (LLM via LiteLlm)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Configures and creates the Google ADK agent that answers questions about
#   a SQLite database by calling the MCP tools in tools/mcp_server.py.
#
# HOW IT WORKS (simplified):
#
#   ┌──────────────────────────────────────────────────────────────────┐
#   │                       Google ADK Agent                          │
#   │  System prompt ──▶ LLM (via LiteLlm) ──▶ MCP tool connection    │
#   └──────────────────────────────────────────────────────────────────┘
#                                                      │ stdio
#                                                      ▼
#                                          ┌─────────────────────┐
#                                          │  FastMCP Server     │
#                                          │  (tools/mcp_server) │
#                                          └─────────────────────┘
#                                                      │
#                                                      ▼
#                                          ┌─────────────────────┐
#                                          │  core/ (sqlite3)    │
#                                          └─────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess and talks to it over
#   stdin/stdout.  The subprocess inherits SQLITE_DB_PATH and the other
#   SQLITE_MCP_* settings from this process.
# =============================================================================

import os
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_sqlite_assistant_prompt
from core.settings import Settings, load_settings

# Settings forwarded to the tool-server subprocess.
_FORWARDED_ENV = ("SQLITE_DB_PATH", "SQLITE_MCP_ALLOW_RAW_SQL", "SQLITE_MCP_LOG_LEVEL")


def build_server_params(settings: Settings) -> StdioServerParameters:
    """Describe how ADK should launch the MCP tool server.

    "uv run" makes the subprocess use the project's virtual environment, and
    running it as a module from the project root keeps `core` importable.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    env = {key: os.environ[key] for key in _FORWARDED_ENV if key in os.environ}
    env["SQLITE_DB_PATH"] = settings.database_path
    env["SQLITE_MCP_ALLOW_RAW_SQL"] = "true" if settings.allow_raw_sql else "false"
    env["PATH"] = os.environ.get("PATH", "")

    return StdioServerParameters(
        command="uv",
        args=["run", "python", "-m", "tools.mcp_server"],
        cwd=project_root,
        env=env,
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create and configure the SQLite assistant agent.

    This function:
      1. Resolves settings (database path, raw SQL flag, model)
      2. Sets up the MCP connection to the FastMCP tool server
      3. Creates an ADK Agent with the system prompt and tools

    Raises:
        ConfigurationError: if SQLITE_DB_PATH is not set.
    """
    settings = settings or load_settings()

    mcp_tools = MCPToolset(connection_params=build_server_params(settings))

    # The model string picks the provider, e.g. "openrouter/openai/gpt-4o";
    # LiteLlm reads the matching API key from the environment.
    return Agent(
        name="sqlite_assistant",
        model=LiteLlm(model=settings.agent_model),
        instruction=get_sqlite_assistant_prompt(
            database_path=settings.database_path,
            allow_raw_sql=settings.allow_raw_sql,
        ),
        tools=[mcp_tools],
    )
