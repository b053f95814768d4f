"""Conformance-test harness for JSON Schema validation engines."""

from __future__ import annotations

from .constants import HARNESS_VERSION
from .ignores import IgnoreRegistry
from .modes import ValidationMode
from .runner import ConformanceSuite

__version__ = HARNESS_VERSION

__all__ = [
    "ConformanceSuite",
    "IgnoreRegistry",
    "ValidationMode",
    "__version__",
]
