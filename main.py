# =============================================================================
# main.py  —  Entry Point for the SQLite Assistant Agent
# =============================================================================
#
# HOW TO RUN:
#   SQLITE_DB_PATH=./example.db uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env and resolves settings (core/settings.py)
#   2. Creates the Google ADK agent (agent/sqlite_agent.py), which starts
#      the MCP tool server as a subprocess
#   3. Reads questions from the terminal and sends them to the agent
#   4. Prints each tool call with its arguments, a short summary of what
#      the tool returned, then the final answer
#
# To run ONLY the tool server (for Claude Desktop, Cursor, or any other
# MCP client):  python -m tools.mcp_server
# =============================================================================

import asyncio
import sys
from typing import Any, Optional

from dotenv import load_dotenv

# Must run BEFORE creating the agent: settings and LiteLlm both read the
# environment (SQLITE_DB_PATH, OPENROUTER_API_KEY, ...).
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.sqlite_agent import create_agent
from core.errors import ConfigurationError
from core.settings import load_settings

APP_NAME = "sqlite_assistant"
USER_ID = "local_user"

# Tools that change or remove data get a warning marker in the transcript.
DESTRUCTIVE_TOOLS = {"update_records", "delete_records", "query"}

# Tool results (record sets especially) are cut to this many characters.
MAX_RESULT_PREVIEW = 200


def describe_tool_call(name: str, args: Optional[dict] = None) -> str:
    """One transcript line for a tool call, e.g. read_records(tableName='people')."""
    arg_str = ", ".join(f"{key}={value!r}" for key, value in (args or {}).items())
    marker = "⚠️ " if name in DESTRUCTIVE_TOOLS else "🔧"
    return f"  {marker} Calling tool: {name}({arg_str})"


def describe_tool_result(name: str, response: Any) -> str:
    """One transcript line summarising what a tool returned."""
    # MCP tools come back as a dumped CallToolResult ({"content": [{"text": ...}]});
    # plain function tools as {"result": ...}.
    if isinstance(response, dict):
        if isinstance(response.get("content"), list):
            response = "\n".join(
                item.get("text", "") for item in response["content"] if isinstance(item, dict)
            )
        else:
            response = response.get("result", response)
    text = str(response).strip()
    if text.startswith("Error"):
        return f"  ❌ {name} failed: {text}"
    if len(text) > MAX_RESULT_PREVIEW:
        text = text[:MAX_RESULT_PREVIEW] + f"... ({len(text)} chars)"
    return f"  📄 {name} → {text}"


async def run_agent():
    """Run the SQLite assistant interactively until the user quits."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        sys.exit(1)

    print("=" * 70)
    print("  SQLITE ASSISTANT")
    print(f"  Database: {settings.database_path}")
    print(f"  Model:    {settings.agent_model}")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent(settings)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask anything about your database.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        # The runner yields events: text from the model, tool calls, and
        # tool results.  The last text part is the answer.
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text
                    call = getattr(part, "function_call", None)
                    if call:
                        print(describe_tool_call(call.name, call.args))
                    response = getattr(part, "function_response", None)
                    if response:
                        print(describe_tool_result(response.name, response.response))

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
