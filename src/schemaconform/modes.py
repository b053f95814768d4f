"""Validation mode flags and their translation from fixture names."""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Optional

from .engine import MODE_CAST, MODE_NONE, MODE_REMOVE_ADDITIONALS
from .errors import UnknownModeError

logger = logging.getLogger(__name__)


class ValidationMode(enum.IntFlag):
    """Independent validator toggles; combine with ``|``."""

    NONE = MODE_NONE
    CAST = MODE_CAST
    REMOVE_ADDITIONALS = MODE_REMOVE_ADDITIONALS


MODE_NAMES = {
    "CAST": ValidationMode.CAST,
    "REMOVE_ADDITIONALS": ValidationMode.REMOVE_ADDITIONALS,
}


def modes_from_names(names: Optional[Iterable[str]], *, strict: bool = False) -> ValidationMode:
    """Fold mode names into a single flag set.

    ``None`` means the case declared no modes. Unknown names are skipped with a
    warning unless ``strict`` is set, in which case they raise
    :class:`UnknownModeError`.
    """

    mode = ValidationMode.NONE
    if names is None:
        return mode
    for name in names:
        flag = MODE_NAMES.get(name) if isinstance(name, str) else None
        if flag is None:
            if strict:
                raise UnknownModeError(f"Unknown validation mode {name!r}")
            logger.warning("Ignoring unknown validation mode %r", name)
            continue
        mode |= flag
    return mode


def mode_names(mode: ValidationMode) -> list[str]:
    return [name for name, flag in MODE_NAMES.items() if mode & flag]
