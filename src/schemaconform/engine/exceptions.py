"""Exception taxonomy raised by the validation engine adapter."""

from __future__ import annotations

from typing import Optional


class EngineException(Exception):
    """Base class for everything the engine raises on purpose."""


class SchemaException(EngineException):
    """The schema definition itself is malformed or illegal."""


class ValidationException(EngineException):
    """The instance was rejected by the schema."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class EngineError(EngineException):
    """Engine-internal failure that says nothing about conformance.

    Unresolvable references, unreachable remote documents and unsupported
    schema versions end up here.
    """
