"""Suite configuration: JSON config files, CLI values and environment flags.

Precedence is CLI option, then environment, then config file, then default.
Relative paths inside a config file resolve against the file's directory.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema

from . import env_flags, error_text
from .constants import ENV_PREFIX
from .engine import Engine
from .errors import ConfigError
from .ignores import IgnoreRegistry
from .runner import ConformanceSuite

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "collections": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "path": {"type": "string", "minLength": 1},
                    "version": {"type": ["string", "null"]},
                },
                "required": ["path"],
                "additionalProperties": False,
            },
        },
        "ignore": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "ignore_files": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "workers": {"type": "integer", "minimum": 1},
        "strict": {"type": "boolean"},
        "allow_network": {"type": "boolean"},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class CollectionSpec:
    path: Path
    version: Optional[str] = None


@dataclass
class SuiteConfig:
    collections: List[CollectionSpec] = field(default_factory=list)
    ignore: List[str] = field(default_factory=list)
    ignore_files: List[Path] = field(default_factory=list)
    workers: Optional[int] = None
    strict: Optional[bool] = None
    allow_network: Optional[bool] = None

    def merge(self, other: "SuiteConfig") -> "SuiteConfig":
        """Return a config where ``other`` adds to lists and overrides scalars."""

        return SuiteConfig(
            collections=self.collections + other.collections,
            ignore=self.ignore + other.ignore,
            ignore_files=self.ignore_files + other.ignore_files,
            workers=other.workers if other.workers is not None else self.workers,
            strict=other.strict if other.strict is not None else self.strict,
            allow_network=(
                other.allow_network if other.allow_network is not None else self.allow_network
            ),
        )


def load_suite_config(path: Union[str, Path]) -> SuiteConfig:
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(error_text.invalid_config(path, str(exc))) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(error_text.invalid_config(path, str(exc))) from exc

    try:
        jsonschema.validate(payload, CONFIG_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise ConfigError(error_text.invalid_config(path, exc.message)) from exc

    base = path.resolve().parent
    return SuiteConfig(
        collections=[
            CollectionSpec(path=base / entry["path"], version=entry.get("version"))
            for entry in payload.get("collections", [])
        ],
        ignore=list(payload.get("ignore", [])),
        ignore_files=[base / entry for entry in payload.get("ignore_files", [])],
        workers=payload.get("workers"),
        strict=payload.get("strict"),
        allow_network=payload.get("allow_network"),
    )


def parse_collection_option(value: str) -> CollectionSpec:
    """Parse ``PATH`` or ``PATH=VERSION`` from the command line."""

    path, sep, version = value.rpartition("=")
    if not sep:
        return CollectionSpec(path=Path(value))
    if not path:
        raise ConfigError(f"Collection option {value!r} has no path")
    return CollectionSpec(path=Path(path), version=version or None)


def environment_config() -> SuiteConfig:
    try:
        workers = env_flags.worker_override()
    except ValueError as exc:
        raise ConfigError(f"Invalid {ENV_PREFIX}WORKERS: {exc}") from exc
    return SuiteConfig(
        workers=workers,
        strict=True if env_flags.is_strict_mode() else None,
        allow_network=True if env_flags.is_network_allowed() else None,
    )


def build_suite(config: SuiteConfig, engine: Optional[Engine] = None) -> ConformanceSuite:
    """Create a suite and load everything ``config`` names.

    Raises :class:`~schemaconform.errors.FixtureLoadError` for broken fixtures
    and :class:`ConfigError` for unreadable ignore files.
    """

    if not config.collections:
        raise ConfigError("No fixture collections configured")

    try:
        ignores = IgnoreRegistry(config.ignore)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    for ignore_file in config.ignore_files:
        try:
            ignores.load_file(ignore_file)
        except (OSError, ValueError) as exc:
            raise ConfigError(f"Cannot read ignore file {ignore_file}: {exc}") from exc

    if engine is None:
        engine = Engine(allow_network=bool(config.allow_network))
    suite = ConformanceSuite(
        engine,
        ignores=ignores,
        strict=bool(config.strict),
        workers=config.workers or 1,
    )
    for entry in config.collections:
        suite.add_collection(entry.path, entry.version)
    return suite
