"""Collection loader behaviour."""

from __future__ import annotations

from pathlib import Path

import pytest

from schemaconform.errors import FixtureLoadError
from schemaconform.loader import load_collection, load_fixture_file
from tests.helpers.fixture_helpers import write_fixture

SIMPLE_GROUP = {"description": "g", "schema": {"type": "integer"}, "valid": True}


def test_loads_nested_files_in_sorted_order(tmp_path: Path) -> None:
    write_fixture(tmp_path, "b.json", [SIMPLE_GROUP])
    write_fixture(tmp_path, "a.json", [SIMPLE_GROUP])
    write_fixture(tmp_path / "nested" / "deeper", "c.json", [SIMPLE_GROUP, SIMPLE_GROUP])

    collections = load_collection(tmp_path, "7")

    names = [Path(collection.file_path).relative_to(tmp_path).as_posix() for collection in collections]
    assert names == ["a.json", "b.json", "nested/deeper/c.json"]
    assert all(collection.version == "7" for collection in collections)
    assert len(collections[2].groups) == 2


def test_order_is_stable_between_loads(tmp_path: Path) -> None:
    for name in ("z.json", "m.json", "sub/a.json", "sub/b.json"):
        write_fixture(tmp_path, name, [SIMPLE_GROUP])

    first = [collection.file_path for collection in load_collection(tmp_path)]
    second = [collection.file_path for collection in load_collection(tmp_path)]
    assert first == second


def test_version_defaults_to_none(tmp_path: Path) -> None:
    write_fixture(tmp_path, "a.json", [SIMPLE_GROUP])
    (collection,) = load_collection(tmp_path)
    assert collection.version is None


def test_empty_directory_yields_no_collections(tmp_path: Path) -> None:
    (tmp_path / "empty").mkdir()
    assert load_collection(tmp_path) == []


def test_missing_directory_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(FixtureLoadError, match="fixture directory not found"):
        load_collection(tmp_path / "nope")


def test_invalid_json_is_fatal(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text("[{", encoding="utf-8")
    with pytest.raises(FixtureLoadError, match="invalid JSON"):
        load_collection(tmp_path)


def test_top_level_must_be_array(tmp_path: Path) -> None:
    write_fixture(tmp_path, "object.json", SIMPLE_GROUP)  # type: ignore[arg-type]
    with pytest.raises(FixtureLoadError, match="array of test groups"):
        load_collection(tmp_path)


def test_group_violations_name_the_file(tmp_path: Path) -> None:
    path = write_fixture(tmp_path, "bad.json", [{"description": "g", "schema": {}}])
    with pytest.raises(FixtureLoadError) as excinfo:
        load_fixture_file(path)
    assert "bad.json" in str(excinfo.value)
    assert "must declare 'valid'" in str(excinfo.value)
