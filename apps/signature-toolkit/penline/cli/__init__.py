"""Penline command-line interface."""

from __future__ import annotations

from .main import build_parser, main
from .structured_logging import (
    DEFAULT_SENSITIVE_FIELD_TOKENS,
    REDACTED_PLACEHOLDER,
    StructuredLogger,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELD_TOKENS",
    "REDACTED_PLACEHOLDER",
    "StructuredLogger",
    "build_parser",
    "main",
]
