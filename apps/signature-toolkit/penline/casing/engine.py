"""Dispatch a transform key and preserve flag to the matching text transform."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType

from . import transforms


class TransformFamily(str, Enum):
    """Whether a transform honours the preserve flag or always tokenises."""

    CASE = "case"
    DELIMITER = "delimiter"


class TransformKey(str, Enum):
    """The twelve supported output formats, in display order."""

    UPPER = "upper"
    LOWER = "lower"
    TITLE = "title"
    SENTENCE = "sentence"
    TOGGLE = "toggle"
    ALTERNATING = "alternating"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"
    DOT = "dot"
    SPACE = "space"

    @property
    def family(self) -> TransformFamily:
        if self in _CASE_KEYS:
            return TransformFamily.CASE
        return TransformFamily.DELIMITER


_CASE_KEYS = frozenset(
    {
        TransformKey.UPPER,
        TransformKey.LOWER,
        TransformKey.TITLE,
        TransformKey.SENTENCE,
        TransformKey.TOGGLE,
        TransformKey.ALTERNATING,
    }
)

Handler = Callable[[str, bool], str]


def _blanket(case: Callable[[str], str]) -> Handler:
    """Word tokens only when preserving, the whole trimmed string otherwise."""

    def handler(text: str, preserve: bool) -> str:
        if preserve:
            return transforms.preserve_word_transform(text, case)
        return case(text.strip())

    return handler


def _per_character(policy: Callable[[str], str]) -> Handler:
    """Apply ``policy`` to the raw text when preserving, to the trimmed text otherwise."""

    def handler(text: str, preserve: bool) -> str:
        return policy(text if preserve else text.strip())

    return handler


def _tokenised(join: Callable[[str], str]) -> Handler:
    def handler(text: str, preserve: bool) -> str:
        return join(text)

    return handler


def _delimited(delimiter: str) -> Handler:
    return _tokenised(lambda text: transforms.to_delimited(text, delimiter))


DELIMITERS: Mapping[TransformKey, str] = MappingProxyType(
    {
        TransformKey.SNAKE: "_",
        TransformKey.KEBAB: "-",
        TransformKey.DOT: ".",
    }
)

HANDLERS: Mapping[TransformKey, Handler] = MappingProxyType(
    {
        TransformKey.UPPER: _blanket(str.upper),
        TransformKey.LOWER: _blanket(str.lower),
        TransformKey.TITLE: _per_character(transforms.to_title_case),
        TransformKey.SENTENCE: _per_character(transforms.to_sentence_case),
        TransformKey.TOGGLE: _per_character(transforms.toggle_case),
        TransformKey.ALTERNATING: _per_character(transforms.alternating_case),
        TransformKey.CAMEL: _tokenised(transforms.to_camel_case),
        TransformKey.PASCAL: _tokenised(transforms.to_pascal_case),
        **{key: _delimited(delimiter) for key, delimiter in DELIMITERS.items()},
        TransformKey.SPACE: _tokenised(transforms.to_space_case),
    }
)


def compute_output(text: str | None, preserve: bool, key: TransformKey | str) -> str:
    """Transform ``text`` with the format named by ``key``.

    ``preserve`` only matters for the case family; delimiter transforms always
    tokenise the input.
    """

    handler = HANDLERS[TransformKey(key)]
    return handler(text or "", bool(preserve))


__all__ = ["DELIMITERS", "HANDLERS", "TransformFamily", "TransformKey", "compute_output"]
