"""Suite orchestration: load collections, run checks, summarize."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .checks import check_case, check_schema
from .engine import Engine
from .ignores import IgnoreRegistry
from .loader import load_collection
from .models import Collection, LogRecord, TestGroup
from .modes import modes_from_names
from .renderer import Summary, summarize
from .results import ResultLog

logger = logging.getLogger(__name__)


def run_group(engine: Engine, collection: Collection, group: TestGroup) -> List[LogRecord]:
    """Run the schema check for ``group`` followed by each of its cases."""

    records = [check_schema(engine, collection, group)]
    for case in group.cases or ():
        records.append(check_case(engine, collection, group, case))
    return records


class ConformanceSuite:
    """Owns the loaded collections, the ignore registry and the result log."""

    def __init__(
        self,
        engine: Optional[Engine] = None,
        *,
        ignores: Optional[IgnoreRegistry] = None,
        strict: bool = False,
        workers: int = 1,
    ) -> None:
        self.engine = engine if engine is not None else Engine()
        self.ignores = ignores if ignores is not None else IgnoreRegistry()
        self.strict = strict
        self.workers = max(1, int(workers))
        self.log = ResultLog()
        self._collections: List[Collection] = []

    @property
    def collections(self) -> Tuple[Collection, ...]:
        return tuple(self._collections)

    def add_collection(
        self, directory: Union[str, Path], version: Optional[str] = None
    ) -> List[Collection]:
        collections = load_collection(directory, version)
        if self.strict:
            for collection in collections:
                _check_mode_names(collection)
        self._collections.extend(collections)
        return collections

    def ignore(self, pattern: str) -> None:
        self.ignores.ignore(pattern)

    def ignore_all(self, patterns: Iterable[str]) -> None:
        self.ignores.extend(patterns)

    def execute(self) -> ResultLog:
        """Run every check once and return a fresh result log."""

        self.log = ResultLog()
        units = [(collection, group) for collection in self._collections for group in collection.groups]
        logger.info("Running %d test group(s) with %d worker(s)", len(units), self.workers)

        if self.workers == 1:
            for collection, group in units:
                self.log.extend(run_group(self.engine, collection, group))
            return self.log

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            # map() yields in submission order, keeping output identical to a sequential run.
            for records in pool.map(lambda unit: run_group(self.engine, *unit), units):
                self.log.extend(records)
        return self.log

    def summarize(self) -> Summary:
        return summarize(self.log, self.ignores)

    def run(self) -> Summary:
        self.execute()
        return self.summarize()


def _check_mode_names(collection: Collection) -> None:
    for group in collection.groups:
        for case in group.cases or ():
            modes_from_names(case.modes, strict=True)
