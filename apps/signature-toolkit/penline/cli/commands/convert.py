"""Implementation of the `penline convert` subcommand."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from rich.table import Table

from penline.casing import Locale, TransformKey, compute_output, transform_label
from penline.config import PenlineProfile
from penline.error_handling import InputNotFoundError

from ..builder import CLICommand, SharedParsers
from ..shared import write_or_print
from ..structured_logging import StructuredLogger
from ._options import LoggingOptions, resolve_logging_options


@dataclass(slots=True)
class ConvertOptions:
    text: str | None
    input_file: Path | None
    output: Path | None
    transform: TransformKey
    preserve: bool
    locale: Locale
    list_only: bool
    logging: LoggingOptions


def build(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    shared: SharedParsers,
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(
        "convert",
        help="Convert text between letter cases and identifier formats",
        description=(
            "Apply one of the case transforms (upper, title, sentence, ...) or identifier "
            "formats (camel, snake, kebab, ...) to text from an argument, a file or stdin."
        ),
        parents=[shared.base],
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("input_file", nargs="?", type=Path, help="File holding the input text")
    parser.add_argument("--text", help="Input text (takes precedence over the file and stdin)")
    parser.add_argument(
        "-t",
        "--transform",
        choices=[key.value for key in TransformKey],
        help="Output format (defaults to the profile, then upper)",
    )
    parser.add_argument(
        "--preserve",
        dest="preserve",
        action="store_true",
        help="Only touch word tokens and keep surrounding whitespace and punctuation",
    )
    parser.add_argument(
        "--no-preserve",
        dest="preserve",
        action="store_false",
        help="Trim the input and transform it as a whole",
    )
    parser.add_argument(
        "--locale",
        choices=[locale.value for locale in Locale],
        help="Language used for transform labels",
    )
    parser.add_argument(
        "--list",
        dest="list_only",
        action="store_true",
        help="List the available transforms and exit",
    )
    parser.add_argument("--output", type=Path, help="Write the result to this file")
    parser.set_defaults(preserve=None)
    return parser


def register() -> CLICommand:
    return CLICommand(
        name="convert",
        help="Convert text between letter cases and identifier formats",
        builder=build,
        handler=_command_handler,
    )


def _command_handler(namespace: argparse.Namespace, profile: PenlineProfile) -> int:
    options = _resolve_options(namespace, profile)
    logger = options.logging.make_logger()

    if options.list_only:
        _print_transforms(logger, options.locale)
        return 0

    try:
        text = _read_input(options)
    except InputNotFoundError as exc:
        logger.log_error(str(exc))
        return 1

    result = compute_output(text, options.preserve, options.transform)
    write_or_print(result, options.output)
    if options.output is not None:
        logger.log_output_write(options.output, kind="conversion")
    return 0


def _read_input(options: ConvertOptions) -> str:
    if options.text is not None:
        return options.text
    if options.input_file is not None:
        if not options.input_file.exists():
            raise InputNotFoundError.create(str(options.input_file))
        return options.input_file.read_text(encoding="utf-8")
    return sys.stdin.read()


def _print_transforms(logger: StructuredLogger, locale: Locale) -> None:
    labels = {key.value: transform_label(key, locale) for key in TransformKey}
    if logger.console is None:
        logger.log_event("convert.transforms", {"locale": locale.value, "transforms": labels})
        return

    table = Table(title="Transforms", show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Label")
    table.add_column("Family", style="dim")
    for key in TransformKey:
        table.add_row(key.value, labels[key.value], key.family.value)
    logger.console.print(table)


def _resolve_options(namespace: argparse.Namespace, profile: PenlineProfile) -> ConvertOptions:
    transform = TransformKey(namespace.transform) if namespace.transform else profile.transform
    preserve = profile.preserve if namespace.preserve is None else bool(namespace.preserve)
    locale = Locale(namespace.locale) if namespace.locale else profile.locale
    return ConvertOptions(
        text=namespace.text,
        input_file=namespace.input_file,
        output=namespace.output,
        transform=transform,
        preserve=preserve,
        locale=locale,
        list_only=bool(namespace.list_only),
        logging=resolve_logging_options(namespace, profile),
    )


__all__ = ["build", "register"]
