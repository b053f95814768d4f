"""Record construction and output comparison shared by the checkers."""

from __future__ import annotations

from typing import Any, Optional

from ..models import KIND_HARD_ERROR, Collection, LogRecord, TestCase, TestGroup


def build_record(
    valid: bool,
    collection: Collection,
    group: TestGroup,
    case: Optional[TestCase],
    error: Optional[str],
    kind: str,
) -> LogRecord:
    return LogRecord(
        valid=valid,
        file=collection.file_path,
        group_description=group.description,
        case_description=case.description if case is not None else None,
        error=error,
        kind=kind,
    )


def build_hard_error(
    prefix: str,
    exc: BaseException,
    collection: Collection,
    group: TestGroup,
    case: Optional[TestCase] = None,
) -> LogRecord:
    detail = str(exc) or type(exc).__name__
    return build_record(False, collection, group, case, f"{prefix}{detail}", KIND_HARD_ERROR)


def is_composite(value: Any) -> bool:
    return isinstance(value, (dict, list))


def json_equal(left: Any, right: Any) -> bool:
    """Deep structural equality for decoded JSON.

    Object key order is irrelevant; array order and length are not. Booleans
    never equal numbers, while ``1`` and ``1.0`` are the same JSON number.
    """

    if isinstance(left, dict) and isinstance(right, dict):
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)
    if isinstance(left, list) and isinstance(right, list):
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_composite(left) or is_composite(right):
        return False
    return left == right


def strict_equal(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def results_match(produced: Any, expected: Any) -> bool:
    """Compare engine output with a fixture's ``expect`` value."""

    if is_composite(produced) and is_composite(expected):
        return json_equal(produced, expected)
    return strict_equal(produced, expected)
