"""
Result rendering and schema models.
"""

from core.models import ColumnSchema, DatabaseInfo, OperationResult, ResultKind, TableSchema


class TestOperationResult:
    def test_success(self):
        result = OperationResult.success("done")

        assert result.kind is ResultKind.MESSAGE
        assert result.ok
        assert result.render() == "done"

    def test_failure(self):
        result = OperationResult.failure("Error executing query: boom")

        assert result.kind is ResultKind.ERROR
        assert not result.ok
        assert result.render() == "Error executing query: boom"

    def test_records_render_compact_json(self):
        result = OperationResult.records([{"id": 1, "name": "x"}, {"id": 2, "name": None}])

        assert result.ok
        assert result.render() == '[{"id":1,"name":"x"},{"id":2,"name":null}]'

    def test_records_keep_non_ascii(self):
        assert OperationResult.records([{"city": "Zürich"}]).render() == '[{"city":"Zürich"}]'

    def test_bytes_render_as_base64(self):
        assert OperationResult.records([{"b": b"hi"}]).render() == '[{"b":"aGk="}]'

    def test_empty_record_set(self):
        assert OperationResult.records([]).render() == "[]"


class TestSchemaModels:
    def test_column_render(self):
        column = ColumnSchema(
            ordinal=2, name="age", declared_type="INTEGER", not_null=True,
            default_value="0", primary_key_position=0,
        )

        assert column.render() == "2 | age | INTEGER | 1 | 0 | 0"
        assert not column.is_primary_key

    def test_column_without_default(self):
        column = ColumnSchema(0, "id", "INTEGER", False, None, 1)

        assert column.render() == "0 | id | INTEGER | 0 | NULL | 1"
        assert column.is_primary_key

    def test_table_without_columns_does_not_exist(self):
        assert not TableSchema("ghosts").exists

    def test_database_info_render(self):
        info = DatabaseInfo(path="/tmp/x.db", exists=True, size_bytes=8192, table_count=3)

        assert info.render() == (
            "Database Path: /tmp/x.db\nExists: True\nSize (bytes): 8192\nTable Count: 3"
        )
