"""CAST mode coercion rules."""

from __future__ import annotations

import pytest

from schemaconform.engine.casting import cast_to_schema, declared_types


@pytest.mark.parametrize(
    ("value", "schema", "expected"),
    [
        ("5", {"type": "integer"}, 5),
        (" -12 ", {"type": "integer"}, -12),
        (3.0, {"type": "integer"}, 3),
        ("4.0", {"type": "integer"}, 4),
        ("2.5", {"type": "number"}, 2.5),
        ("7", {"type": "number"}, 7),
        (7, {"type": "string"}, "7"),
        ("true", {"type": "boolean"}, True),
        ("0", {"type": "boolean"}, False),
        (1, {"type": "boolean"}, True),
        ("", {"type": "null"}, None),
        ("null", {"type": "null"}, None),
    ],
)
def test_unambiguous_values_are_cast(value, schema, expected) -> None:
    result = cast_to_schema(value, schema)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    ("value", "schema"),
    [
        ("five", {"type": "integer"}),
        ("2.5", {"type": "integer"}),
        (True, {"type": "string"}),
        (True, {"type": "integer"}),
        ("maybe", {"type": "boolean"}),
        (2, {"type": "boolean"}),
        ("nan", {"type": "number"}),
        ({"a": 1}, {"type": "string"}),
    ],
)
def test_ambiguous_values_are_left_alone(value, schema) -> None:
    assert cast_to_schema(value, schema) == value


def test_matching_values_are_untouched() -> None:
    assert cast_to_schema("5", {"type": ["string", "integer"]}) == "5"


def test_first_castable_declared_type_wins() -> None:
    assert cast_to_schema("5", {"type": ["boolean", "integer"]}) == 5


def test_schema_without_type_is_ignored() -> None:
    assert cast_to_schema("5", {"minimum": 1}) == "5"
    assert cast_to_schema("5", True) == "5"


def test_declared_types_normalises_shapes() -> None:
    assert declared_types({"type": "integer"}) == ["integer"]
    assert declared_types({"type": ["integer", 5]}) == ["integer"]
    assert declared_types(False) == []
