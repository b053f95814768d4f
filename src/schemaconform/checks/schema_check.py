"""Schema-level conformance: does the engine accept or reject the schema itself?"""

from __future__ import annotations

import logging
from typing import Optional

from ..constants import SCHEMA_HARD_ERROR_PREFIX, SCHEMA_PLACEHOLDER_INSTANCE
from ..engine import Engine, SchemaException, ValidationException
from ..models import KIND_SCHEMA, Collection, LogRecord, TestGroup
from ..modes import ValidationMode
from .base import build_hard_error, build_record

logger = logging.getLogger(__name__)


def expected_schema_validity(group: TestGroup) -> bool:
    # Groups that carry data cases must always compile.
    if group.has_cases:
        return True
    return bool(group.valid)


def check_schema(engine: Engine, collection: Collection, group: TestGroup) -> LogRecord:
    expected_valid = expected_schema_validity(group)
    error: Optional[str] = None

    try:
        schema = engine.schema(group.schema, collection.version)
        validator = engine.validator(ValidationMode.NONE)
        validator.validate(SCHEMA_PLACEHOLDER_INSTANCE, schema)
        test_result = True
    except ValidationException as exc:
        test_result = True
        error = str(exc)
    except SchemaException as exc:
        test_result = False
        error = str(exc)
    except Exception as exc:  # noqa: BLE001  # pylint: disable=broad-except
        logger.debug(
            "Engine error while checking schema of %s / %s",
            collection.file_path,
            group.description,
            exc_info=True,
        )
        return build_hard_error(SCHEMA_HARD_ERROR_PREFIX, exc, collection, group)

    passed = test_result == expected_valid
    return build_record(
        passed,
        collection,
        group,
        None,
        None if passed else error,
        KIND_SCHEMA,
    )
