"""Reference validation engine built on the ``jsonschema`` library.

The harness talks to the engine only through :class:`Engine`: build a schema
for a raw value and version label, build a validator for a mode bitmask, and
validate. Swapping in another engine means providing an object with the
same two factory methods.
"""

from __future__ import annotations

from typing import Any, Optional

from .exceptions import EngineError, EngineException, SchemaException, ValidationException
from .schema import VERSION_VALIDATORS, Schema
from .validator import MODE_CAST, MODE_NONE, MODE_REMOVE_ADDITIONALS, Validator


class Engine:
    """Factory pair used by the conformance checkers.

    Remote ``$ref`` targets are not downloaded unless ``allow_network`` is set.
    """

    def __init__(self, *, allow_network: bool = False) -> None:
        self.allow_network = allow_network

    def schema(self, raw: Any, version: Optional[str] = None) -> Schema:
        return Schema(raw, version)

    def validator(self, mode: int = MODE_NONE) -> Validator:
        return Validator(mode, allow_network=self.allow_network)


__all__ = [
    "Engine",
    "EngineError",
    "EngineException",
    "MODE_CAST",
    "MODE_NONE",
    "MODE_REMOVE_ADDITIONALS",
    "SchemaException",
    "Schema",
    "ValidationException",
    "Validator",
    "VERSION_VALIDATORS",
]
