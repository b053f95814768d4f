"""Expected-output comparison: composite deep equality vs strict scalars."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from schemaconform.checks import json_equal, results_match

json_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=5)
json_values = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=4), children, max_size=4),
    max_leaves=12,
)


def test_object_key_order_is_ignored() -> None:
    assert results_match({"a": 1, "b": 2}, {"b": 2, "a": 1})


def test_array_order_matters() -> None:
    assert not results_match([1, 2], [2, 1])
    assert not results_match([1, 2], [1, 2, 3])


def test_nested_structures_compare_recursively() -> None:
    produced = {"items": [{"id": 1, "tags": ["x"]}], "meta": {"n": None}}
    expected = {"meta": {"n": None}, "items": [{"tags": ["x"], "id": 1}]}
    assert results_match(produced, expected)


def test_scalar_comparison_requires_same_type() -> None:
    assert not results_match("1", 1)
    assert not results_match(1, 1.0)
    assert not results_match(True, 1)
    assert results_match(5, 5)
    assert results_match(None, None)


def test_composite_against_scalar_never_matches() -> None:
    assert not results_match({}, None)
    assert not results_match([], "[]")


def test_booleans_inside_composites_do_not_equal_numbers() -> None:
    assert not json_equal([True], [1])
    assert json_equal([1], [1.0])


def test_object_and_array_are_different_composites() -> None:
    assert not results_match({}, [])


@given(value=json_values)
def test_values_match_themselves(value) -> None:
    assert results_match(value, value)


@given(mapping=st.dictionaries(st.text(max_size=4), json_scalars, min_size=1, max_size=6))
def test_reversed_key_order_matches(mapping) -> None:
    reordered = dict(reversed(list(mapping.items())))
    assert results_match(mapping, reordered)
