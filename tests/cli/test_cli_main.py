from __future__ import annotations

import json
from pathlib import Path

import pytest
from penline import cli
from penline.cli.builder import CLIBuilder
from penline.cli.commands import convert

from tests.helpers.assertions import expect


def test_build_parser_registers_commands() -> None:
    parser = cli.build_parser()

    for command in ("signature", "validate", "convert", "batch"):
        args = parser.parse_args(_minimal_args(command))
        expect(args.command == command, f"{command} should be registered")
        expect(callable(args.handler), f"{command} should resolve a handler")


def _minimal_args(command: str) -> list[str]:
    return {
        "signature": ["signature", "--demo"],
        "validate": ["validate", "contact.json"],
        "convert": ["convert", "--text", "x"],
        "batch": ["batch", "contacts.csv"],
    }[command]


def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main([])

    expect(exit_code == 1, "no command should exit with 1")
    expect("usage: penline" in capsys.readouterr().out, "help text expected")


def test_profile_from_search_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    profiles = tmp_path / "profiles"
    profiles.mkdir()
    (profiles / "loud.toml").write_text('transform = "upper"\npreserve = false\n')

    exit_code = cli.main(
        [
            "convert",
            "--text",
            "  quiet  ",
            "--profile",
            "loud",
            "--profile-search-path",
            str(profiles),
        ]
    )

    expect(exit_code == 0, "custom profile should load")
    expect(capsys.readouterr().out == "QUIET\n", "profile disables preservation")


def test_unknown_profile_exits_with_two(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(
        ["convert", "--text", "x", "--profile", "does-not-exist", "--log-format", "json"]
    )
    payload = json.loads(capsys.readouterr().out)

    expect(exit_code == 2, "unknown profiles should exit with 2")
    expect(payload["event"] == "error", "an error event expected")
    expect(payload["data"]["category"] == "configuration_error", "configuration category")
    expect("could not be found" in payload["data"]["message"], "error explains the lookup")
    expect(payload["data"]["details"] == {"profile": "does-not-exist"}, "profile is named")


def test_invalid_profile_exits_with_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    profile = tmp_path / "broken.toml"
    profile.write_text('log_format = "xml"\n')

    exit_code = cli.main(["convert", "--text", "x", "--profile", str(profile)])

    captured = capsys.readouterr()

    expect(exit_code == 2, "invalid profiles should exit with 2")
    expect(captured.out == "", "profile errors stay off stdout")
    expect(captured.err.startswith("Error:"), "error prefix expected")
    expect("Hint:" in captured.err, "a suggested fix follows the error")


def test_verbose_flag_enables_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("DEBUG", logger="penline")

    exit_code = cli.main(["signature", "--demo", "--verbose"])

    expect(exit_code == 0, "verbose run should succeed")
    expect(
        any("Rendered light signature" in record.getMessage() for record in caplog.records),
        "builder debug message should be captured",
    )


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--version"])

    expect(excinfo.value.code == 0, "--version should exit cleanly")
    expect(capsys.readouterr().out.startswith("penline "), "version string expected")


def test_duplicate_command_registration_is_rejected() -> None:
    builder = CLIBuilder()
    builder.register(convert.register())

    with pytest.raises(ValueError):
        builder.register(convert.register())
