from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, Path]


def _stringify(value: PathLike | None) -> str:
    if value is None:
        return "-"
    return str(value)


def directory_not_found(path: PathLike) -> str:
    return f"Error: fixture directory not found: {_stringify(path)}"


def unreadable_file(path: PathLike, detail: str) -> str:
    return f"Error: cannot read fixture file {_stringify(path)}: {detail}"


def invalid_json(path: PathLike, detail: str) -> str:
    return f"Error: invalid JSON in {_stringify(path)}: {detail}"


def invalid_fixture(path: PathLike, detail: str) -> str:
    return f"Error: invalid fixture structure in {_stringify(path)}: {detail}"


def invalid_config(path: PathLike, detail: str) -> str:
    return f"Error: invalid suite config {_stringify(path)}: {detail}"


def expect_mismatch(produced: Any, expected: Any) -> str:
    return f"Produced {_dump(produced)} but expected {_dump(expected)}"


def _dump(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)
