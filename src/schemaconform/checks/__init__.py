"""Schema-level and data-level conformance checks."""

from __future__ import annotations

from .base import json_equal, results_match, strict_equal
from .data_check import check_case
from .schema_check import check_schema, expected_schema_validity

__all__ = [
    "check_case",
    "check_schema",
    "expected_schema_validity",
    "json_equal",
    "results_match",
    "strict_equal",
]
