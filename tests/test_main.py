"""
Transcript lines the interactive agent prints for tool calls and results.
"""

import pytest

from main import MAX_RESULT_PREVIEW, describe_tool_call, describe_tool_result


class TestDescribeToolCall:
    def test_includes_arguments(self):
        line = describe_tool_call("read_records", {"tableName": "people", "limit": 10})
        assert line == "  🔧 Calling tool: read_records(tableName='people', limit=10)"

    def test_no_arguments(self):
        assert describe_tool_call("list_tables", None) == "  🔧 Calling tool: list_tables()"

    @pytest.mark.parametrize("name", ["update_records", "delete_records", "query"])
    def test_destructive_tools_are_flagged(self, name):
        assert describe_tool_call(name, {}).startswith("  ⚠️  Calling tool: ")


class TestDescribeToolResult:
    def test_mcp_content_text(self):
        response = {"content": [{"type": "text", "text": "people\norders"}], "isError": False}
        assert describe_tool_result("list_tables", response) == "  📄 list_tables → people\norders"

    def test_error_text_is_flagged(self):
        response = {"result": "Error reading records from table 'ghosts': no such table: ghosts"}

        line = describe_tool_result("read_records", response)

        assert line == "  ❌ read_records failed: Error reading records from table 'ghosts': no such table: ghosts"

    def test_long_record_sets_are_truncated(self):
        rows = "[" + ",".join('{"id":%d}' % i for i in range(100)) + "]"

        line = describe_tool_result("read_records", rows)

        assert line.endswith(f"... ({len(rows)} chars)")
        assert rows[:MAX_RESULT_PREVIEW] in line
        assert rows not in line
