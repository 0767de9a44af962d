"""Implementation of the `penline signature` subcommand."""

from __future__ import annotations

import argparse
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from penline.config import PenlineProfile
from penline.error_handling import (
    ContactValidationError,
    InputNotFoundError,
    PenlineError,
)
from penline.signature import (
    DEMO_RECORD,
    ContactRecord,
    SignatureOptions,
    Theme,
    build_preview_document,
    build_signature_html,
    logo_data_uri,
    validate_contact_record,
)

from ..builder import CLICommand, SharedParsers
from ..shared import load_contact_record, resolve_preview, resolve_theme, write_or_print
from ._options import LoggingOptions, resolve_logging_options


@dataclass(slots=True)
class SignatureCommandOptions:
    input_file: Path | None
    demo: bool
    logo_file: Path | None
    output: Path | None
    theme: Theme
    preview: bool
    skip_validation: bool
    logging: LoggingOptions


def build(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    shared: SharedParsers,
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "signature",
        help="Render an email signature from a contact file",
        description=(
            "Build a table-based, inline-styled HTML signature from a JSON, TOML or YAML "
            "contact record. Rendering is refused while the record fails validation."
        ),
        parents=[shared.base, shared.signature],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", dest="input_file", type=Path, help="Contact record file")
    source.add_argument("--demo", action="store_true", help="Render the built-in sample contact")
    parser.add_argument(
        "--logo-file",
        type=Path,
        help="Image embedded as the logo (replaces any logo URL in the record)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the HTML to this file instead of standard output",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Render even when required fields are missing or malformed",
    )
    return parser


def register() -> CLICommand:
    return CLICommand(
        name="signature",
        help="Render an email signature from a contact file",
        builder=build,
        handler=_command_handler,
    )


def _command_handler(namespace: argparse.Namespace, profile: PenlineProfile) -> int:
    options = _resolve_options(namespace, profile)
    logger = options.logging.make_logger()

    try:
        record = _load_record(options)
    except PenlineError as exc:
        logger.log_error(str(exc))
        return 1

    if not options.skip_validation:
        report = validate_contact_record(record)
        if report.has_errors:
            logger.log_validation(report.errors, title="Fix validation errors")
            logger.log_error(str(ContactValidationError.from_report(report)))
            return 1

    html = build_signature_html(record, SignatureOptions(theme=options.theme))
    if options.preview:
        html = build_preview_document(html, options.theme)

    write_or_print(html, options.output)
    if options.output is not None:
        logger.log_output_write(options.output, kind="signature")
    return 0


def _load_record(options: SignatureCommandOptions) -> ContactRecord:
    if options.demo or options.input_file is None:
        record = DEMO_RECORD
    else:
        record = load_contact_record(options.input_file)

    if options.logo_file is not None:
        if not options.logo_file.exists():
            raise InputNotFoundError.create(str(options.logo_file))
        mime_type = mimetypes.guess_type(options.logo_file.name)[0] or "image/png"
        embedded = logo_data_uri(options.logo_file.read_bytes(), mime_type)
        record = record.model_copy(update={"logo_data_url": embedded, "logo_url": ""})
    return record


def _resolve_options(
    namespace: argparse.Namespace, profile: PenlineProfile
) -> SignatureCommandOptions:
    return SignatureCommandOptions(
        input_file=namespace.input_file,
        demo=bool(namespace.demo),
        logo_file=namespace.logo_file,
        output=namespace.output,
        theme=resolve_theme(namespace, profile),
        preview=resolve_preview(namespace, profile),
        skip_validation=bool(namespace.skip_validation),
        logging=resolve_logging_options(namespace, profile),
    )


__all__ = ["build", "register"]
