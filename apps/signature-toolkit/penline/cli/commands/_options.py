"""Option resolution shared by subcommands."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass

from penline.config import PenlineProfile

from ..shared import normalise_sensitive_fields, resolve_log_format
from ..structured_logging import DEFAULT_SENSITIVE_FIELD_TOKENS, StructuredLogger


@dataclass(slots=True)
class LoggingOptions:
    log_format: str
    sensitive_fields: tuple[str, ...]

    def make_logger(self) -> StructuredLogger:
        return StructuredLogger(self.log_format, self.sensitive_fields)


def resolve_logging_options(
    namespace: argparse.Namespace, profile: PenlineProfile
) -> LoggingOptions:
    raw_sensitive: Iterable[str] | None = getattr(namespace, "sensitive_fields", None)
    if raw_sensitive is None and profile.sensitive_fields:
        raw_sensitive = profile.sensitive_fields
    return LoggingOptions(
        log_format=resolve_log_format(namespace, profile),
        sensitive_fields=normalise_sensitive_fields(raw_sensitive, DEFAULT_SENSITIVE_FIELD_TOKENS),
    )


__all__ = ["LoggingOptions", "resolve_logging_options"]
