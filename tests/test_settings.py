"""
Environment-driven settings.
"""

import pytest

from core.errors import ConfigurationError
from core.service import DatabaseOperationService
from core.settings import DEFAULT_AGENT_MODEL, load_settings, parse_bool


def test_database_path_is_required():
    with pytest.raises(ConfigurationError, match="SQLITE_DB_PATH"):
        load_settings({})


def test_blank_database_path_is_rejected():
    with pytest.raises(ConfigurationError):
        load_settings({"SQLITE_DB_PATH": "   "})


def test_defaults():
    settings = load_settings({"SQLITE_DB_PATH": "/data/app.db"})

    assert settings.database_path == "/data/app.db"
    assert settings.allow_raw_sql is True
    assert settings.log_level == "INFO"
    assert settings.agent_model == DEFAULT_AGENT_MODEL


def test_overrides():
    settings = load_settings(
        {
            "SQLITE_DB_PATH": "app.db",
            "SQLITE_MCP_ALLOW_RAW_SQL": "false",
            "SQLITE_MCP_LOG_LEVEL": "debug",
            "SQLITE_AGENT_MODEL": "openrouter/openai/gpt-4o-mini",
        }
    )

    assert settings.allow_raw_sql is False
    assert settings.log_level == "DEBUG"
    assert settings.agent_model == "openrouter/openai/gpt-4o-mini"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SQLITE_DB_PATH", "from-env.db")
    monkeypatch.delenv("SQLITE_MCP_ALLOW_RAW_SQL", raising=False)

    assert load_settings().database_path == "from-env.db"


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("YES", True), ("1", True), ("off", False), ("0", False), (None, True), ("", True)],
)
def test_parse_bool(value, expected):
    assert parse_bool(value, default=True) is expected


def test_parse_bool_rejects_garbage():
    with pytest.raises(ConfigurationError):
        parse_bool("maybe", default=True)


def test_service_from_settings():
    settings = load_settings({"SQLITE_DB_PATH": "x.db", "SQLITE_MCP_ALLOW_RAW_SQL": "no"})
    service = DatabaseOperationService.from_settings(settings)

    assert service.database_path == "x.db"
    assert service.allow_raw_sql is False


@pytest.mark.parametrize("value, expected", [("warning", "WARNING"), (" error ", "ERROR"), ("", "INFO")])
def test_log_level_is_normalised(value, expected):
    assert load_settings({"SQLITE_DB_PATH": "x.db", "SQLITE_MCP_LOG_LEVEL": value}).log_level == expected


@pytest.mark.parametrize("value", ["verbose", "Level 5", "10"])
def test_unknown_log_level_is_rejected(value):
    with pytest.raises(ConfigurationError, match="SQLITE_MCP_LOG_LEVEL"):
        load_settings({"SQLITE_DB_PATH": "x.db", "SQLITE_MCP_LOG_LEVEL": value})
