"""Command line entry point for the schemaconform harness."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

import click

from . import env_flags
from .config import (
    SuiteConfig,
    build_suite,
    environment_config,
    load_suite_config,
    parse_collection_option,
)
from .constants import DEFAULT_LOG_LEVEL, EXIT_CONFIG_ERROR, EXIT_SUCCESS, HARNESS_NAME, HARNESS_VERSION
from .errors import ConformanceError
from .renderer import render_json, render_text
from .runner import ConformanceSuite

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class _EchoHandler(logging.Handler):
    """Send log lines to whatever stderr click currently resolves."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # noqa: BLE001  # pylint: disable=broad-except
            self.handleError(record)


def configure_logging(level: Optional[str]) -> None:
    name = (level or env_flags.log_level_override() or DEFAULT_LOG_LEVEL).upper()
    logger = logging.getLogger(HARNESS_NAME)
    logger.setLevel(getattr(logging, name, logging.WARNING))
    logger.propagate = False
    if not any(isinstance(handler, _EchoHandler) for handler in logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def _suite_options(func):
    options = [
        click.option(
            "--config",
            "config_path",
            type=click.Path(path_type=Path, dir_okay=False),
            help="JSON suite config listing collections and ignore patterns",
        ),
        click.option(
            "--collection",
            "collections",
            multiple=True,
            metavar="PATH[=VERSION]",
            help="Fixture directory, optionally tagged with a schema version",
        ),
        click.option("--ignore", "ignores", multiple=True, help="Substring of a failure to ignore"),
        click.option(
            "--ignore-file",
            "ignore_files",
            multiple=True,
            type=click.Path(path_type=Path, dir_okay=False),
            help="File with one ignore pattern per line",
        ),
        click.option("--strict", is_flag=True, help="Reject unknown validation mode names"),
        click.option(
            "--allow-network",
            is_flag=True,
            help="Download remote $ref documents instead of failing them",
        ),
        click.option(
            "--log-level",
            type=click.Choice(LOG_LEVELS, case_sensitive=False),
            help="Diagnostic log level (stderr)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _assemble_config(
    config_path: Optional[Path],
    collections: Tuple[str, ...],
    ignores: Tuple[str, ...],
    ignore_files: Tuple[Path, ...],
    strict: bool,
    allow_network: bool,
    workers: Optional[int] = None,
) -> SuiteConfig:
    config = load_suite_config(config_path) if config_path else SuiteConfig()
    config = config.merge(environment_config())
    return config.merge(
        SuiteConfig(
            collections=[parse_collection_option(value) for value in collections],
            ignore=list(ignores),
            ignore_files=list(ignore_files),
            workers=workers,
            strict=True if strict else None,
            allow_network=True if allow_network else None,
        )
    )


def _load_suite(config: SuiteConfig) -> ConformanceSuite:
    try:
        return build_suite(config)
    except ConformanceError as exc:
        click.echo(str(exc), err=True)
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)


@click.group()
@click.version_option(HARNESS_VERSION, prog_name=HARNESS_NAME)
def cli() -> None:
    """JSON Schema engine conformance harness."""


@cli.command()
@_suite_options
@click.option("--workers", type=click.IntRange(min=1), help="Run test groups on N threads")
@click.option(
    "--json-output/--no-json-output",
    "json_output",
    default=False,
    help="Emit a JSON report instead of text",
)
@click.option("--no-color", is_flag=True, help="Disable ANSI color in text output")
@click.option("--verbose", is_flag=True, help="Also list passing checks")
def run(
    config_path: Optional[Path],
    collections: Tuple[str, ...],
    ignores: Tuple[str, ...],
    ignore_files: Tuple[Path, ...],
    strict: bool,
    allow_network: bool,
    log_level: Optional[str],
    workers: Optional[int],
    json_output: bool,
    no_color: bool,
    verbose: bool,
) -> None:
    """Run every configured fixture collection and gate on the failure count."""

    configure_logging(log_level)
    try:
        config = _assemble_config(
            config_path, collections, ignores, ignore_files, strict, allow_network, workers
        )
    except ConformanceError as exc:
        click.echo(str(exc), err=True)
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

    suite = _load_suite(config)
    summary = suite.run()

    if json_output:
        click.echo(render_json(summary))
    else:
        use_color = env_flags.should_use_color(no_color)
        click.echo(render_text(summary, use_color=use_color, verbose=verbose))
    raise click.exceptions.Exit(summary.exit_code)


@cli.command(name="collections")
@_suite_options
def list_collections(
    config_path: Optional[Path],
    collections: Tuple[str, ...],
    ignores: Tuple[str, ...],
    ignore_files: Tuple[Path, ...],
    strict: bool,
    allow_network: bool,
    log_level: Optional[str],
) -> None:
    """List the fixture files a run would execute, without running them."""

    configure_logging(log_level)
    try:
        config = _assemble_config(
            config_path, collections, ignores, ignore_files, strict, allow_network
        )
    except ConformanceError as exc:
        click.echo(str(exc), err=True)
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

    suite = _load_suite(config)
    for collection in suite.collections:
        case_count = sum(len(group.cases or ()) for group in collection.groups)
        click.echo(
            f"{collection.file_path} (version={collection.version or '-'}): "
            f"{len(collection.groups)} group(s), {case_count} case(s)"
        )
    click.echo(f"Ignore patterns: {len(suite.ignores)}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])
    try:
        result = cli.main(args=args, prog_name=HARNESS_NAME, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        return EXIT_CONFIG_ERROR
    if isinstance(result, int):
        return result
    return EXIT_SUCCESS
