"""Fixture collection loader.

Walks a fixture directory recursively and parses every regular file into a
:class:`~schemaconform.models.Collection`. Paths are visited in sorted order
so that diagnostic output is identical between runs.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Union

from . import error_text
from .errors import FixtureLoadError
from .models import Collection, TestGroup

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def load_collection(directory: Union[str, Path], version: Optional[str] = None) -> List[Collection]:
    """Return one Collection per fixture file found under ``directory``."""

    root = Path(directory)
    if not root.is_dir():
        raise FixtureLoadError(error_text.directory_not_found(root))

    collections = [load_fixture_file(path, version) for path in _iter_fixture_files(root)]
    logger.info(
        "Loaded %d fixture file(s) from %s (version=%s)", len(collections), root, version
    )
    return collections


def load_fixture_file(path: Union[str, Path], version: Optional[str] = None) -> Collection:
    path = Path(path)
    try:
        contents = path.read_text(encoding=ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureLoadError(error_text.unreadable_file(path, str(exc))) from exc

    try:
        payload = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise FixtureLoadError(error_text.invalid_json(path, str(exc))) from exc

    if not isinstance(payload, list):
        raise FixtureLoadError(
            error_text.invalid_fixture(path, "top-level value must be an array of test groups")
        )

    try:
        groups = tuple(TestGroup.from_dict(entry) for entry in payload)
    except ValueError as exc:
        raise FixtureLoadError(error_text.invalid_fixture(path, str(exc))) from exc

    logger.debug("Parsed %s: %d group(s)", path, len(groups))
    return Collection(file_path=str(path), version=version, groups=groups)


def _iter_fixture_files(root: Path) -> Iterator[Path]:
    for path in sorted(root.rglob("*")):
        if path.is_file():
            yield path
