"""Data-level conformance: validate one case and compare verdict and output."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .. import error_text
from ..constants import DATA_HARD_ERROR_PREFIX
from ..engine import Engine, ValidationException
from ..models import KIND_DATA, Collection, LogRecord, TestCase, TestGroup
from ..modes import modes_from_names
from .base import build_hard_error, build_record, results_match

logger = logging.getLogger(__name__)


def check_case(
    engine: Engine,
    collection: Collection,
    group: TestGroup,
    case: TestCase,
) -> LogRecord:
    mode = modes_from_names(case.modes)
    produced: Any = None
    error: Optional[str] = None

    # Fresh schema and validator so modes and engine state stay per-case.
    try:
        schema = engine.schema(group.schema, collection.version)
        validator = engine.validator(mode)
        produced = validator.validate(case.data, schema)
        test_result = True
    except ValidationException as exc:
        test_result = False
        error = str(exc)
    except Exception as exc:  # noqa: BLE001  # pylint: disable=broad-except
        logger.debug(
            "Engine error while checking %s / %s / %s",
            collection.file_path,
            group.description,
            case.description,
            exc_info=True,
        )
        return build_hard_error(DATA_HARD_ERROR_PREFIX, exc, collection, group, case)

    if case.has_expect and not results_match(produced, case.expect):
        test_result = False
        if error is None:
            error = error_text.expect_mismatch(produced, case.expect)

    passed = test_result == case.valid
    return build_record(
        passed,
        collection,
        group,
        case,
        None if passed else error,
        KIND_DATA,
    )
