"""CLI behaviour of ``schemaconform run`` and ``schemaconform collections``."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from schemaconform.cli import cli, main
from tests.helpers.fixture_helpers import write_fixture


def _failing_corpus(directory: Path) -> Path:
    write_fixture(
        directory,
        "type.json",
        [
            {
                "description": "integer",
                "schema": {"type": "integer"},
                "tests": [
                    {"description": "one", "data": 1, "valid": True},
                    {"description": "mislabelled string", "data": "x", "valid": True},
                ],
            }
        ],
    )
    return directory


def test_bundled_suite_exits_zero(suite_root: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--config", str(suite_root / "suite.json"), "--no-color"])

    assert result.exit_code == 0, result.output
    assert "SKIP " in result.output
    assert "ref.json | remote ref | ENGINE ERROR IN SCHEMA CHECK" in result.output
    assert "Total Fail: 0" in result.output
    assert "FAIL " not in result.output


def test_failure_exits_one_and_lists_message(tmp_path: Path) -> None:
    corpus = _failing_corpus(tmp_path / "draft7")
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--collection", f"{corpus}=7", "--no-color"])

    assert result.exit_code == 1
    assert "type.json | integer | mislabelled string | 'x' is not of type 'integer'" in result.output
    assert result.output.startswith("FAIL ")
    assert "Total Succeed: 2" in result.output
    assert "Total Fail: 1" in result.output


def test_ignore_option_turns_failure_into_skip(tmp_path: Path) -> None:
    corpus = _failing_corpus(tmp_path / "draft7")
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["run", "--collection", f"{corpus}=7", "--ignore", "mislabelled string", "--no-color"],
    )

    assert result.exit_code == 0
    assert result.output.startswith("SKIP ")
    assert "type.json | integer | mislabelled string" in result.output


def test_ignore_file_option(tmp_path: Path) -> None:
    corpus = _failing_corpus(tmp_path / "draft7")
    ignore_file = tmp_path / "known.txt"
    ignore_file.write_text("# known engine gaps\n\ninteger | mislabelled\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        cli, ["run", "--collection", f"{corpus}=7", "--ignore-file", str(ignore_file)]
    )
    assert result.exit_code == 0


def test_broken_fixture_exits_two(tmp_path: Path) -> None:
    (tmp_path / "broken.json").write_text("not json", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--collection", str(tmp_path)])

    assert result.exit_code == 2
    assert "broken.json" in result.output


def test_missing_collection_directory_exits_two(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--collection", str(tmp_path / "absent")])
    assert result.exit_code == 2


def test_no_collections_exits_two() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run"])
    assert result.exit_code == 2
    assert "No fixture collections configured" in result.output


def test_bad_worker_environment_exits_two(suite_root: Path, monkeypatch) -> None:
    monkeypatch.setenv("SCHEMACONFORM_WORKERS", "lots")
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--config", str(suite_root / "suite.json")])

    assert result.exit_code == 2
    assert "SCHEMACONFORM_WORKERS" in result.output


def test_json_report(suite_root: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["run", "--config", str(suite_root / "suite.json"), "--json-output"]
    )

    assert result.exit_code == 0
    report = json.loads(result.stdout)
    assert report["totals"]["failed"] == 0
    assert report["totals"]["ignored"] == 2
    assert {entry["status"] for entry in report["results"]} == {"SKIP"}


def test_verbose_lists_passing_checks(tmp_path: Path) -> None:
    corpus = _failing_corpus(tmp_path / "draft7")
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--collection", f"{corpus}=7", "--verbose", "--no-color"])
    assert result.output.startswith("PASS ")
    assert "type.json | integer | one" in result.output


def test_workers_option_matches_sequential(suite_root: Path) -> None:
    runner = CliRunner()
    config = str(suite_root / "suite.json")
    sequential = runner.invoke(cli, ["run", "--config", config, "--verbose", "--no-color"])
    parallel = runner.invoke(
        cli, ["run", "--config", config, "--verbose", "--no-color", "--workers", "4"]
    )
    assert sequential.output == parallel.output


def test_forced_color_output(suite_root: Path, monkeypatch) -> None:
    monkeypatch.setenv("SCHEMACONFORM_FORCE_COLOR", "1")
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--config", str(suite_root / "suite.json")])
    assert "\033[" in result.output

    monkeypatch.setenv("NO_COLOR", "1")
    plain = runner.invoke(cli, ["run", "--config", str(suite_root / "suite.json")])
    assert "\033[" not in plain.output


def test_strict_flag_rejects_unknown_modes(tmp_path: Path) -> None:
    write_fixture(
        tmp_path,
        "modes.json",
        [
            {
                "description": "g",
                "schema": {},
                "tests": [{"description": "c", "data": 1, "modes": ["SHOUT"], "valid": True}],
            }
        ],
    )
    runner = CliRunner()
    assert runner.invoke(cli, ["run", "--collection", str(tmp_path)]).exit_code == 0
    strict = runner.invoke(cli, ["run", "--collection", str(tmp_path), "--strict"])
    assert strict.exit_code == 2
    assert "SHOUT" in strict.output


def test_collections_command(suite_root: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["collections", "--config", str(suite_root / "suite.json")])

    assert result.exit_code == 0
    assert "type.json (version=7)" in result.output
    assert "Ignore patterns: 2" in result.output


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "schemaconform" in result.output


def test_main_returns_exit_codes(suite_root: Path, tmp_path: Path) -> None:
    assert main(["run", "--config", str(suite_root / "suite.json"), "--no-color"]) == 0
    corpus = _failing_corpus(tmp_path / "draft7")
    assert main(["run", "--collection", f"{corpus}=7", "--no-color"]) == 1
    assert main(["run"]) == 2
    assert main(["run", "--workers", "0"]) == 2
