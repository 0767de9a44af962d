"""Penline: email signature HTML builder and text case converter."""

from __future__ import annotations

from .casing import TransformKey, compute_output
from .config import PenlineProfile, load_profile
from .error_handling import ErrorCategory, ErrorContext, ErrorSeverity, PenlineError
from .signature import (
    ContactRecord,
    SignatureOptions,
    Theme,
    build_preview_document,
    build_signature_html,
    escape_html,
    normalize_url,
    validate_contact_record,
)

__version__ = "0.1.0"

__all__ = [
    "ContactRecord",
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "PenlineError",
    "PenlineProfile",
    "SignatureOptions",
    "Theme",
    "TransformKey",
    "__version__",
    "build_preview_document",
    "build_signature_html",
    "compute_output",
    "escape_html",
    "load_profile",
    "normalize_url",
    "validate_contact_record",
]
