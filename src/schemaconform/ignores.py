"""Substring-based registry of known-failing conformance cases."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple, Union

COMMENT_PREFIX = "#"


class IgnoreRegistry:
    """Holds ignore patterns matched as case-sensitive substrings.

    A failing record whose rendered message contains any registered pattern is
    shown in the report but does not count towards the failure total.
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._patterns: List[str] = []
        self.extend(patterns)

    def ignore(self, pattern: str) -> None:
        if not isinstance(pattern, str) or not pattern:
            raise ValueError("Ignore patterns must be non-empty strings")
        if pattern not in self._patterns:
            self._patterns.append(pattern)

    def extend(self, patterns: Iterable[str]) -> None:
        for pattern in patterns:
            self.ignore(pattern)

    def load_file(self, path: Union[str, Path]) -> int:
        """Register one pattern per line of ``path``, trailing whitespace stripped.

        Returns how many pattern lines were read.
        """

        count = 0
        for line in Path(path).read_text(encoding="utf-8").splitlines():
            if not line.strip() or line.lstrip().startswith(COMMENT_PREFIX):
                continue
            self.ignore(line.rstrip())
            count += 1
        return count

    def should_ignore(self, message: str) -> bool:
        return any(pattern in message for pattern in self._patterns)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._patterns
