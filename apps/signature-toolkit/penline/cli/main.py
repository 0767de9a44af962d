"""Entry point for the Penline CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import cast

from penline.config import (
    DEFAULT_PROFILE,
    PenlineProfile,
    ProfileNotFoundError,
    ProfileValidationError,
    load_profile,
)
from penline.error_handling import ConfigurationError

from .builder import CLIBuilder, CommandHandler
from .commands import batch, convert, signature, validate
from .commands._options import resolve_logging_options

EPILOG = (
    "Profiles may be defined as TOML or YAML files. Use --profile-search-path to locate "
    "custom profiles."
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    builder = CLIBuilder(
        description="Email signature builder and text case converter",
        epilog=EPILOG,
    )
    builder.register(signature.register())
    builder.register(validate.register())
    builder.register(convert.register())
    builder.register(batch.register())
    return builder.build()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = cast(CommandHandler | None, getattr(args, "handler", None))
    if handler is None:
        parser.print_help()
        return 1

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)

    try:
        profile = _load_profile(args)
    except (ProfileNotFoundError, ProfileValidationError) as exc:
        error = ConfigurationError.from_profile_error(str(args.profile), exc)
        logger = resolve_logging_options(args, DEFAULT_PROFILE).make_logger()
        logger.log_error_context(error.context)
        return 2

    return handler(args, profile)


def _load_profile(args: argparse.Namespace) -> PenlineProfile:
    identifier = getattr(args, "profile", None)
    if not identifier:
        return DEFAULT_PROFILE

    raw_search_paths = getattr(args, "profile_search_paths", None) or []
    search_paths = [Path(path) for path in raw_search_paths]

    return load_profile(identifier, search_paths=search_paths)


__all__ = ["build_parser", "main"]
