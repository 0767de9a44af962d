"""Text case and identifier-format conversion."""

from __future__ import annotations

from .engine import HANDLERS, TransformFamily, TransformKey, compute_output
from .labels import TRANSFORM_LABELS, Locale, transform_label
from .transforms import (
    alternating_case,
    split_words,
    to_camel_case,
    to_delimited,
    to_pascal_case,
    to_sentence_case,
    to_space_case,
    to_title_case,
    toggle_case,
)

__all__ = [
    "HANDLERS",
    "Locale",
    "TRANSFORM_LABELS",
    "TransformFamily",
    "TransformKey",
    "alternating_case",
    "compute_output",
    "split_words",
    "to_camel_case",
    "to_delimited",
    "to_pascal_case",
    "to_sentence_case",
    "to_space_case",
    "to_title_case",
    "toggle_case",
    "transform_label",
]
