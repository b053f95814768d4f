"""Global pytest configuration for schemaconform tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from schemaconform.models import Collection

_REPO_ROOT = Path(__file__).resolve().parents[1]
SUITE_ROOT = _REPO_ROOT / "tests" / "fixtures" / "suite"


@pytest.fixture(scope="session")
def suite_root() -> Path:
    """Directory holding the bundled fixture corpus and its suite config."""

    return SUITE_ROOT


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment flags from leaking into harness behaviour."""

    for name in (
        "NO_COLOR",
        "SCHEMACONFORM_NO_COLOR",
        "SCHEMACONFORM_FORCE_COLOR",
        "SCHEMACONFORM_STRICT",
        "SCHEMACONFORM_WORKERS",
        "SCHEMACONFORM_LOG_LEVEL",
        "SCHEMACONFORM_ALLOW_NETWORK",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_harness_logger():
    yield
    logger = logging.getLogger("schemaconform")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def collection() -> Collection:
    return Collection(file_path="fixtures/draft7/type.json", version="7", groups=())
