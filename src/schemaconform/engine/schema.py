"""Schema construction for the jsonschema-backed engine."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type

from jsonschema import (
    Draft3Validator,
    Draft4Validator,
    Draft6Validator,
    Draft7Validator,
    Draft201909Validator,
    Draft202012Validator,
)
from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator as ValidatorProtocol
from jsonschema.validators import validator_for

from .exceptions import EngineError, SchemaException

DEFAULT_VALIDATOR: Type[ValidatorProtocol] = Draft202012Validator

VERSION_VALIDATORS: Dict[str, Type[ValidatorProtocol]] = {
    "3": Draft3Validator,
    "4": Draft4Validator,
    "6": Draft6Validator,
    "7": Draft7Validator,
    "2019-09": Draft201909Validator,
    "2020-12": Draft202012Validator,
}


def normalize_version(version: Optional[str]) -> Optional[str]:
    """Map labels like ``draft7`` or ``draft2020-12`` onto the canonical keys."""

    if version is None:
        return None
    label = str(version).strip().lower()
    if label.startswith("draft"):
        label = label[len("draft"):].lstrip("-_ ")
    return label


def resolve_validator_class(raw: Any, version: Optional[str]) -> Type[ValidatorProtocol]:
    label = normalize_version(version)
    if label is None:
        if not isinstance(raw, dict):
            return DEFAULT_VALIDATOR
        return validator_for(raw, default=DEFAULT_VALIDATOR)
    try:
        return VERSION_VALIDATORS[label]
    except KeyError:
        raise EngineError(f'Unsupported schema version "{version}"') from None


class Schema:
    """A raw schema value checked against its dialect's meta-schema."""

    def __init__(self, raw: Any, version: Optional[str] = None) -> None:
        self.raw = raw
        self.version = version
        self.validator_class = resolve_validator_class(raw, version)
        try:
            self.validator_class.check_schema(raw)
        except SchemaError as exc:
            raise SchemaException(exc.message) from exc

    def __repr__(self) -> str:
        return f"Schema(version={self.version!r}, dialect={self.validator_class.__name__})"
