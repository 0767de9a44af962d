"""Implementation of the `penline validate` subcommand."""

from __future__ import annotations

import argparse
from pathlib import Path

from penline.config import PenlineProfile
from penline.error_handling import PenlineError
from penline.signature import validate_contact_record

from ..builder import CLICommand, SharedParsers
from ..shared import load_contact_record
from ._options import resolve_logging_options


def build(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    shared: SharedParsers,
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "validate",
        help="Check a contact file against the signature form rules",
        description=(
            "Report required-field, email, phone and URL problems for a contact record. "
            "Exits with status 1 when any field fails."
        ),
        parents=[shared.base],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input_file", type=Path, help="Contact record file (JSON, TOML or YAML)")
    return parser


def register() -> CLICommand:
    return CLICommand(
        name="validate",
        help="Check a contact file against the signature form rules",
        builder=build,
        handler=_command_handler,
    )


def _command_handler(namespace: argparse.Namespace, profile: PenlineProfile) -> int:
    logger = resolve_logging_options(namespace, profile).make_logger()

    try:
        record = load_contact_record(Path(namespace.input_file))
    except PenlineError as exc:
        logger.log_error(str(exc))
        return 1

    report = validate_contact_record(record)
    logger.log_validation(report.errors, title=f"Validation: {namespace.input_file}")
    return 1 if report.has_errors else 0


__all__ = ["build", "register"]
