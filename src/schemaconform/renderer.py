"""Aggregation and human-readable rendering of conformance results.

:func:`summarize` is a pure pass over the finished result log: it builds each
failure message, applies the ignore registry and counts. Rendering to text or
JSON works on the resulting :class:`Summary` only.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from .constants import (
    ANSI_BOLD,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    EXIT_CONFORMANCE_FAIL,
    EXIT_SUCCESS,
    HARNESS_NAME,
    HARNESS_VERSION,
    MESSAGE_SEPARATOR,
    SUMMARY_FAIL_LABEL,
    SUMMARY_SUCCEED_LABEL,
)
from .ignores import IgnoreRegistry
from .models import LogRecord

STATUS_PASS = "PASS"
STATUS_FAIL = "FAIL"
STATUS_SKIP = "SKIP"

_PALETTE = {
    STATUS_PASS: ANSI_GREEN,
    STATUS_FAIL: ANSI_RED,
    STATUS_SKIP: ANSI_YELLOW,
}


@dataclass(frozen=True)
class RenderedLine:
    status: str
    message: str
    record: LogRecord


@dataclass(frozen=True)
class Summary:
    lines: Tuple[RenderedLine, ...]
    succeeded: int
    failed: int
    ignored: int

    @property
    def exit_code(self) -> int:
        return EXIT_CONFORMANCE_FAIL if self.failed else EXIT_SUCCESS


def build_message(record: LogRecord) -> str:
    return MESSAGE_SEPARATOR.join(record.message_parts())


def summarize(records: Iterable[LogRecord], ignores: IgnoreRegistry) -> Summary:
    lines: List[RenderedLine] = []
    succeeded = failed = ignored = 0

    for record in records:
        message = build_message(record)
        if record.valid:
            succeeded += 1
            lines.append(RenderedLine(STATUS_PASS, message, record))
            continue
        if ignores.should_ignore(message):
            ignored += 1
            lines.append(RenderedLine(STATUS_SKIP, message, record))
            continue
        failed += 1
        lines.append(RenderedLine(STATUS_FAIL, message, record))

    return Summary(lines=tuple(lines), succeeded=succeeded, failed=failed, ignored=ignored)


def exit_code(summary: Summary) -> int:
    return summary.exit_code


def colorize(text: str, code: str, use_color: bool) -> str:
    if not use_color:
        return text
    return f"{code}{text}{ANSI_RESET}"


def status_badge(status: str, use_color: bool) -> str:
    return colorize(status, _PALETTE.get(status, ANSI_BOLD), use_color)


def render_line(line: RenderedLine, use_color: bool) -> str:
    return f"{status_badge(line.status, use_color)} {line.message}"


def render_text(summary: Summary, *, use_color: bool = False, verbose: bool = False) -> str:
    """Return failing and ignored records plus the two tally lines."""

    rendered: List[str] = []
    for line in summary.lines:
        if line.status == STATUS_PASS and not verbose:
            continue
        rendered.append(render_line(line, use_color))

    if rendered:
        rendered.append("")
    rendered.append(colorize(f"{SUMMARY_SUCCEED_LABEL}: {summary.succeeded}", ANSI_GREEN, use_color))
    rendered.append(colorize(f"{SUMMARY_FAIL_LABEL}: {summary.failed}", ANSI_RED, use_color))
    return "\n".join(rendered)


def build_report(summary: Summary) -> Dict[str, Any]:
    results = [
        {"status": line.status, "message": line.message, **line.record.to_dict()}
        for line in summary.lines
        if line.status != STATUS_PASS
    ]
    return {
        "harness": HARNESS_NAME,
        "harness_version": HARNESS_VERSION,
        "totals": {
            "succeeded": summary.succeeded,
            "failed": summary.failed,
            "ignored": summary.ignored,
            "records": len(summary.lines),
        },
        "results": results,
        "exit_code": summary.exit_code,
    }


def render_json(summary: Summary) -> str:
    return json.dumps(build_report(summary), indent=2, sort_keys=True)
