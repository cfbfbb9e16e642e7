"""
Identifier validation and the SQL builders that rely on it.
"""

import pytest

from core.errors import InvalidIdentifierError, MissingArgumentError
from core.identifiers import quote_identifier, validate_identifier
from core.records import build_delete, build_insert, build_select, build_update, normalize_parameters


@pytest.mark.parametrize("name", ["people", "_private", "Order2", "a_b_c", "café", "naïve", "日付"])
def test_valid_identifiers(name):
    assert validate_identifier(name) == name
    assert quote_identifier(name) == f'"{name}"'


@pytest.mark.parametrize(
    "name",
    ["", "2fast", "drop table", "people;--", 'quo"te', "a-b", "t.c", "people\n", "٣rd"],
)
def test_invalid_identifiers(name):
    with pytest.raises(InvalidIdentifierError) as exc_info:
        validate_identifier(name, "table")
    assert exc_info.value.identifier == name
    assert "Invalid table name" in str(exc_info.value)


def test_non_string_identifier():
    with pytest.raises(InvalidIdentifierError):
        validate_identifier(None)


class TestBuilders:
    def test_insert(self):
        sql, params = build_insert("people", {"name": "Ada", "age": 36})

        assert sql == 'INSERT INTO "people" ("name", "age") VALUES (:name, :age)'
        assert params == {"name": "Ada", "age": 36}

    def test_select_with_conditions(self):
        assert build_select("people", "age > 30", 5, 10) == (
            'SELECT * FROM "people" WHERE age > 30 LIMIT 5 OFFSET 10'
        )

    def test_select_defaults(self):
        assert build_select("people") == 'SELECT * FROM "people" LIMIT 100 OFFSET 0'

    def test_update(self):
        sql, params = build_update("people", {"age": 1, "name": "x"}, "id = 3")

        assert sql == 'UPDATE "people" SET "age" = :age, "name" = :name WHERE id = 3'
        assert params == {"age": 1, "name": "x"}

    def test_delete(self):
        assert build_delete("people", "id = 3") == 'DELETE FROM "people" WHERE id = 3'

    def test_delete_requires_conditions(self):
        with pytest.raises(MissingArgumentError):
            build_delete("people", None)

    def test_insert_rejects_bad_column(self):
        with pytest.raises(InvalidIdentifierError):
            build_insert("people", {"x); DROP TABLE people; --": 1})


def test_normalize_parameters_strips_prefixes():
    assert normalize_parameters({"@a": 1, ":b": 2, "$c": 3, "d": 4}) == {"a": 1, "b": 2, "c": 3, "d": 4}
    assert normalize_parameters(None) == {}
