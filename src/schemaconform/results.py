"""Append-only log of executed check outcomes."""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, List, Tuple

from .models import LogRecord


class ResultLog:
    """Ordered record sink; appends are serialized so workers may share it."""

    def __init__(self) -> None:
        self._records: List[LogRecord] = []
        self._lock = threading.Lock()

    def append(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)

    def extend(self, records: Iterable[LogRecord]) -> None:
        batch = list(records)
        with self._lock:
            self._records.extend(batch)

    @property
    def records(self) -> Tuple[LogRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def __iter__(self) -> Iterator[LogRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
