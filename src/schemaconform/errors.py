"""Harness-level exception hierarchy.

Engine exceptions live in :mod:`schemaconform.engine`; the classes here cover
problems with the fixture corpus and with harness configuration, both of
which abort a run before any conformance result is produced.
"""

from __future__ import annotations


class ConformanceError(RuntimeError):
    """Base class for fatal harness errors."""


class FixtureLoadError(ConformanceError):
    """Raised when a fixture directory or file cannot be turned into a Collection."""


class UnknownModeError(FixtureLoadError):
    """Raised in strict mode when a test case names an unrecognised mode flag."""


class ConfigError(ConformanceError):
    """Raised when a suite config file or CLI option is unusable."""
