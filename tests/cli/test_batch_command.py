from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd
import pytest
from penline import cli

from tests.helpers.assertions import expect

ROWS = [
    {
        "firstName": "Alex",
        "lastName": "Johnson",
        "jobTitle": "Designer",
        "companyName": "Acme",
        "emailAddress": "alex@acme.com",
        "officePhone": "+1 212 555 0199",
    },
    {
        "firstName": "Sam",
        "lastName": "Lee",
        "jobTitle": "Engineer",
        "companyName": "Acme",
        "emailAddress": "sam@acme.com",
        "officePhone": "",
    },
    {
        "firstName": "Pat",
        "lastName": "Doe",
        "jobTitle": "Analyst",
        "companyName": "Acme",
        "emailAddress": "broken",
        "officePhone": "",
    },
]


def _json_lines(output: str) -> list[dict[str, Any]]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def _write_csv(path: Path) -> Path:
    pd.DataFrame(ROWS).to_csv(path, index=False)
    return path


def test_batch_renders_valid_rows_and_skips_invalid(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    sheet = _write_csv(tmp_path / "contacts.csv")
    output_dir = tmp_path / "signatures"

    exit_code = cli.main(
        ["batch", str(sheet), "--output-dir", str(output_dir), "--log-format", "json"]
    )
    events = _json_lines(capsys.readouterr().out)

    expect(exit_code == 0, "batch should complete")
    expect(
        sorted(path.name for path in output_dir.iterdir())
        == ["001-alex-johnson.html", "002-sam-lee.html"],
        "only valid rows should be rendered",
    )
    summary = next(event for event in events if event["event"] == "batch.summary")
    expect(summary["data"]["rows"] == 3, "all rows counted")
    expect(summary["data"]["rendered"] == 2, "two rows rendered")
    expect(summary["data"]["skipped"] == 1, "one row skipped")
    expect(summary["data"]["skipped_rows"] == [3], "the skipped row is named")
    expect(
        any("Row 3 skipped" in event["data"].get("message", "") for event in events),
        "skipped row should be reported",
    )


def test_batch_fail_fast_stops_on_invalid_row(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    sheet = _write_csv(tmp_path / "contacts.csv")

    exit_code = cli.main(
        ["batch", str(sheet), "--output-dir", str(tmp_path / "out"), "--fail-fast"]
    )

    expect(exit_code == 1, "fail-fast should abort the batch")
    expect("Row 3" in capsys.readouterr().err, "failing row should be named")


def test_batch_reads_excel_with_preview(tmp_path: Path) -> None:
    sheet = tmp_path / "contacts.xlsx"
    pd.DataFrame(ROWS[:1]).to_excel(sheet, index=False)
    output_dir = tmp_path / "html"

    exit_code = cli.main(
        ["batch", str(sheet), "--output-dir", str(output_dir), "--preview", "--theme", "dark"]
    )

    rendered = (output_dir / "001-alex-johnson.html").read_text(encoding="utf-8")
    expect(exit_code == 0, "excel batch should complete")
    expect(rendered.startswith("<!doctype html>"), "preview documents written")
    expect("background:#0b0b0f;" in rendered, "dark preview background expected")


def test_batch_missing_sheet(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["batch", str(tmp_path / "absent.csv"), "--log-format", "json"])
    events = _json_lines(capsys.readouterr().out)

    expect(exit_code == 1, "missing sheet should fail")
    expect("Input file not found" in events[-1]["data"]["message"], "error names the file")


def test_batch_skips_blank_rows_as_warnings(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    blank = {key: "" for key in ROWS[0]}
    sheet = tmp_path / "contacts.csv"
    pd.DataFrame([ROWS[0], blank, ROWS[1]]).to_csv(sheet, index=False)
    output_dir = tmp_path / "signatures"

    exit_code = cli.main(
        [
            "batch",
            str(sheet),
            "--output-dir",
            str(output_dir),
            "--fail-fast",
            "--log-format",
            "json",
        ]
    )
    events = _json_lines(capsys.readouterr().out)

    expect(exit_code == 0, "blank rows should not trip --fail-fast")
    expect(
        sorted(path.name for path in output_dir.iterdir())
        == ["001-alex-johnson.html", "003-sam-lee.html"],
        "blank rows produce no file",
    )
    summary = next(event for event in events if event["event"] == "batch.summary")
    expect(summary["data"]["blank_rows"] == [2], "the blank row is named")
    expect(summary["data"]["skipped"] == 0, "blank rows are not validation failures")
