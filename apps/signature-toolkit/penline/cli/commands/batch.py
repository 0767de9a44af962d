"""Implementation of the `penline batch` subcommand."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pandas as pd

from penline.casing import to_delimited
from penline.config import PenlineProfile
from penline.error_handling import (
    ContactValidationError,
    ErrorCategory,
    ErrorContext,
    ErrorHandler,
    ErrorSeverity,
    InputNotFoundError,
    PenlineError,
)
from penline.signature import (
    ContactRecord,
    SignatureOptions,
    Theme,
    build_preview_document,
    build_signature_html,
    validate_contact_record,
)

from ..builder import CLICommand, SharedParsers
from ..shared import resolve_preview, resolve_theme
from ._options import LoggingOptions, resolve_logging_options


@dataclass(slots=True)
class BatchOptions:
    input_file: Path
    output_dir: Path
    theme: Theme
    preview: bool
    skip_validation: bool
    fail_fast: bool
    logging: LoggingOptions


def build(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    shared: SharedParsers,
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "batch",
        help="Render one signature per row of a contact spreadsheet",
        description=(
            "Read a CSV or Excel sheet whose columns match contact fields (snake_case or "
            "camelCase) and write one HTML signature per valid row."
        ),
        parents=[shared.base, shared.signature],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input_file", type=Path, help="CSV or Excel contact sheet")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("signatures"),
        help="Directory receiving the rendered HTML files",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Render rows even when they fail the form rules",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first invalid row instead of skipping it",
    )
    return parser


def register() -> CLICommand:
    return CLICommand(
        name="batch",
        help="Render one signature per row of a contact spreadsheet",
        builder=build,
        handler=_command_handler,
    )


def _command_handler(namespace: argparse.Namespace, profile: PenlineProfile) -> int:
    options = _resolve_options(namespace, profile)
    logger = options.logging.make_logger()

    try:
        frame = _read_sheet(options.input_file)
    except PenlineError as exc:
        logger.log_error(str(exc))
        return 1
    except (OSError, ValueError) as exc:
        logger.log_error(f"Unable to read {options.input_file}: {exc}")
        return 1

    if frame.empty:
        logger.log_error("Contact sheet is empty")
        return 1

    handler = ErrorHandler(fail_fast=options.fail_fast)
    written: list[Path] = []
    options.output_dir.mkdir(parents=True, exist_ok=True)

    try:
        for row_number, row in enumerate(frame.to_dict(orient="records"), start=1):
            record = ContactRecord.from_mapping(_clean_row(row))
            if _is_blank(record):
                handler.handle_error(_blank_row(options.input_file, row_number))
                continue
            if not options.skip_validation:
                validation = validate_contact_record(record)
                if validation.has_errors:
                    error = ContactValidationError.from_report(
                        validation, source_file=str(options.input_file), row=row_number
                    )
                    handler.handle_error(error.context)
                    continue
            written.append(_write_signature(record, row_number, options))
    except PenlineError as exc:
        logger.log_error(f"Row {exc.context.source_row}: {exc}")
        return 1

    report = handler.get_report()
    summary = report.get_summary()
    logger.log_event(
        "batch.summary",
        {
            "input_path": options.input_file,
            "output_dir": options.output_dir,
            "rows": len(frame),
            "rendered": len(written),
            "skipped": summary["total_errors"],
            "skipped_rows": summary["rows_with_errors"],
            "blank_rows": [context.source_row for context in report.warnings],
        },
    )
    for context in report.errors:
        logger.log_error(f"Row {context.source_row} skipped: {context.message}")
    return 0


def _read_sheet(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise InputNotFoundError.create(str(path))
    if path.suffix.lower() == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    return pd.read_excel(path, dtype=str)


def _is_blank(record: ContactRecord) -> bool:
    return not any(value.strip() for value in record.to_dict().values())


def _blank_row(input_file: Path, row_number: int) -> ErrorContext:
    return ErrorContext(
        category=ErrorCategory.INVALID_FORMAT,
        severity=ErrorSeverity.WARNING,
        message=f"Row {row_number} has no contact fields",
        source_file=str(input_file),
        source_row=row_number,
    )


def _clean_row(row: dict[Any, Any]) -> dict[str, Any]:
    return {str(key).strip(): value for key, value in row.items()}


def _write_signature(record: ContactRecord, row_number: int, options: BatchOptions) -> Path:
    html = build_signature_html(record, SignatureOptions(theme=options.theme))
    if options.preview:
        html = build_preview_document(html, options.theme)
    stem = to_delimited(f"{record.first_name} {record.last_name}", "-") or "contact"
    target = options.output_dir / f"{row_number:03d}-{stem}.html"
    target.write_text(html, encoding="utf-8")
    return target


def _resolve_options(namespace: argparse.Namespace, profile: PenlineProfile) -> BatchOptions:
    return BatchOptions(
        input_file=Path(namespace.input_file),
        output_dir=Path(namespace.output_dir),
        theme=resolve_theme(namespace, profile),
        preview=resolve_preview(namespace, profile),
        skip_validation=bool(namespace.skip_validation),
        fail_fast=bool(namespace.fail_fast),
        logging=resolve_logging_options(namespace, profile),
    )


__all__ = ["build", "register"]
