from __future__ import annotations

import os
import sys
from typing import Optional

from .constants import ENV_PREFIX

_TRUTHY = {"1", "true", "yes", "on"}
_FALSEY = {"0", "false", "no", "off"}


def env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def env_falsey(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in _FALSEY


def env_override(name: str) -> Optional[str]:
    """Return the trimmed ``SCHEMACONFORM_<name>`` value, or None when unset or blank."""

    value = os.getenv(f"{ENV_PREFIX}{name}")
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def is_strict_mode() -> bool:
    return env_truthy(os.getenv(f"{ENV_PREFIX}STRICT"))


def worker_override() -> Optional[int]:
    """Return ``SCHEMACONFORM_WORKERS`` as a positive int; raise ValueError on anything else."""

    raw = env_override("WORKERS")
    if raw is None:
        return None
    workers = int(raw)
    if workers < 1:
        raise ValueError(f"must be at least 1, got {workers}")
    return workers


def log_level_override() -> Optional[str]:
    raw = env_override("LOG_LEVEL")
    return raw.upper() if raw else None


def should_use_color(disable_flag: bool) -> bool:
    if disable_flag:
        return False
    if os.getenv("NO_COLOR") is not None:
        return False
    no_color = os.getenv(f"{ENV_PREFIX}NO_COLOR")
    if no_color is not None and not env_falsey(no_color):
        return False
    if env_truthy(os.getenv(f"{ENV_PREFIX}FORCE_COLOR")):
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def is_network_allowed() -> bool:
    """Remote ``$ref`` documents are only fetched when explicitly enabled."""

    return env_truthy(os.getenv(f"{ENV_PREFIX}ALLOW_NETWORK"))
