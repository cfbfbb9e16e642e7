"""
System prompt construction for the agent.
"""

from datetime import date

from agent.prompt import get_sqlite_assistant_prompt


def test_prompt_names_database_and_date():
    prompt = get_sqlite_assistant_prompt("/data/shop.db")

    assert "DATABASE FILE: /data/shop.db" in prompt
    assert date.today().isoformat() in prompt


def test_prompt_lists_every_tool():
    prompt = get_sqlite_assistant_prompt("x.db")

    for tool in (
        "db_info", "list_tables", "get_table_schema", "read_records",
        "create_record", "update_records", "delete_records", "query",
    ):
        assert tool in prompt


def test_prompt_reflects_raw_sql_flag():
    assert "Raw SQL is ENABLED" in get_sqlite_assistant_prompt("x.db", allow_raw_sql=True)
    assert "Raw SQL is DISABLED" in get_sqlite_assistant_prompt("x.db", allow_raw_sql=False)
