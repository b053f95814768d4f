"""Fixture and result records for the conformance harness.

Fixture records keep the difference between a field that is absent and one
that is present with a ``null`` value: ``expect: null`` pins a ``None``
output while a missing ``expect`` skips the comparison, and a group without
``tests`` is a schema-only group while ``tests: []`` is not. Absence is
represented by :data:`MISSING`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


class _Missing:
    """Sentinel type for fixture fields that were not declared."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Missing":
        return self


MISSING: Any = _Missing()

CASES_KEYS = ("tests", "cases")

KIND_SCHEMA = "schema"
KIND_DATA = "data"
KIND_HARD_ERROR = "hard-error"


def is_missing(value: Any) -> bool:
    return value is MISSING


@dataclass(frozen=True)
class TestCase:
    """One data instance validated against its group's schema."""

    __test__ = False

    description: str
    valid: bool
    data: Any = None
    expect: Any = MISSING
    modes: Optional[Tuple[str, ...]] = None

    @property
    def has_expect(self) -> bool:
        return not is_missing(self.expect)

    @classmethod
    def from_dict(cls, raw: Any) -> "TestCase":
        if not isinstance(raw, dict):
            raise ValueError(f"test case must be an object, got {type(raw).__name__}")
        description = _require_description(raw, "test case")
        valid = raw.get("valid", MISSING)
        if not isinstance(valid, bool):
            raise ValueError(f"test case {description!r} must declare a boolean 'valid'")
        modes = raw.get("modes")
        return cls(
            description=description,
            valid=valid,
            data=raw.get("data"),
            expect=raw.get("expect", MISSING),
            modes=tuple(modes) if isinstance(modes, list) else None,
        )


@dataclass(frozen=True)
class TestGroup:
    """One schema under test, with its expected validity and/or data cases."""

    __test__ = False

    description: str
    schema: Any
    valid: Optional[bool] = None
    cases: Optional[Tuple[TestCase, ...]] = None

    @property
    def has_cases(self) -> bool:
        return self.cases is not None

    @classmethod
    def from_dict(cls, raw: Any) -> "TestGroup":
        if not isinstance(raw, dict):
            raise ValueError(f"test group must be an object, got {type(raw).__name__}")
        description = _require_description(raw, "test group")
        if "schema" not in raw:
            raise ValueError(f"test group {description!r} has no 'schema'")

        declared = raw.get("valid", MISSING)
        if not is_missing(declared) and not isinstance(declared, bool):
            raise ValueError(f"test group {description!r} has a non-boolean 'valid'")
        valid: Optional[bool] = None if is_missing(declared) else declared

        cases: Optional[Tuple[TestCase, ...]] = None
        for key in CASES_KEYS:
            if key in raw:
                entries = raw[key]
                if not isinstance(entries, list):
                    raise ValueError(f"test group {description!r} field {key!r} must be an array")
                cases = tuple(TestCase.from_dict(entry) for entry in entries)
                break

        if cases is None and valid is None:
            raise ValueError(
                f"test group {description!r} has no test cases and must declare 'valid'"
            )
        return cls(description=description, schema=raw["schema"], valid=valid, cases=cases)


@dataclass(frozen=True)
class Collection:
    file_path: str
    version: Optional[str]
    groups: Tuple[TestGroup, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LogRecord:
    """Outcome of one executed check."""

    valid: bool
    file: str
    group_description: str
    case_description: Optional[str] = None
    error: Optional[str] = None
    kind: str = KIND_SCHEMA

    @property
    def is_hard_error(self) -> bool:
        return self.kind == KIND_HARD_ERROR

    def message_parts(self) -> Tuple[str, ...]:
        parts = (self.file, self.group_description, self.case_description, self.error)
        return tuple(part for part in parts if part)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "file": self.file,
            "group_description": self.group_description,
            "case_description": self.case_description,
            "error": self.error,
            "kind": self.kind,
        }


def _require_description(raw: Dict[str, Any], label: str) -> str:
    description = raw.get("description")
    if not isinstance(description, str):
        raise ValueError(f"{label} must have a string 'description'")
    return description
