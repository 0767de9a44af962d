"""Unicode-aware case and delimiter transforms.

A *word token* is a letter followed by any run of letters or digits. The
delimiter transforms split on every run of characters that is neither a
letter nor a digit.
"""

from __future__ import annotations

import re
from collections.abc import Callable

# ``[^\W_]`` is a letter or any numeric character.
ALNUM_RUN = re.compile(r"[^\W_]+")
NON_ALNUM_RUN = re.compile(r"[\W_]+")

SENTENCE_BREAKS = frozenset(".!?\n")


def split_words(text: str) -> list[str]:
    """Split ``text`` into alphanumeric tokens, dropping empty pieces."""

    return [token for token in NON_ALNUM_RUN.split(text.strip()) if token]


def preserve_word_transform(text: str, transform: Callable[[str], str]) -> str:
    """Apply ``transform`` to each word token, leaving everything else as-is.

    A token starts at the first letter of an alphanumeric run, so leading
    digits and numeric signs such as ``²`` or ``½`` stay outside it.
    """

    def _apply(match: re.Match[str]) -> str:
        run = match.group(0)
        start = next((index for index, char in enumerate(run) if char.isalpha()), None)
        if start is None:
            return run
        return run[:start] + transform(run[start:])

    return ALNUM_RUN.sub(_apply, text)


def capitalize_word(word: str) -> str:
    """Lower-case ``word`` and upper-case its first character."""

    lowered = word.lower()
    if not lowered:
        return ""
    return lowered[0].upper() + lowered[1:]


def to_title_case(text: str) -> str:
    return preserve_word_transform(text, capitalize_word)


def to_sentence_case(text: str) -> str:
    """Lower-case ``text`` and capitalise the first letter of every sentence.

    A sentence starts at the beginning of the text and after ``.``, ``!``,
    ``?`` or a newline.
    """

    out: list[str] = []
    cap_next = True
    for char in text.lower():
        if cap_next and char.isalpha():
            out.append(char.upper())
            cap_next = False
            continue
        out.append(char)
        if char in SENTENCE_BREAKS:
            cap_next = True
    return "".join(out)


def toggle_case(text: str) -> str:
    out: list[str] = []
    for char in text:
        if not char.isalpha():
            out.append(char)
        elif char == char.upper():
            out.append(char.lower())
        else:
            out.append(char.upper())
    return "".join(out)


def alternating_case(text: str) -> str:
    """Alternate lower/upper across letters only, starting lower-case."""

    out: list[str] = []
    flip = False
    for char in text:
        if not char.isalpha():
            out.append(char)
            continue
        out.append(char.upper() if flip else char.lower())
        flip = not flip
    return "".join(out)


def to_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(capitalize_word(word) for word in words[1:])


def to_pascal_case(text: str) -> str:
    return "".join(capitalize_word(word) for word in split_words(text))


def to_delimited(text: str, delimiter: str) -> str:
    """Lower-case every token and join them with ``delimiter``."""

    return delimiter.join(word.lower() for word in split_words(text))


def to_space_case(text: str) -> str:
    """Join tokens with single spaces, keeping their original casing."""

    return " ".join(split_words(text))


__all__ = [
    "ALNUM_RUN",
    "NON_ALNUM_RUN",
    "alternating_case",
    "capitalize_word",
    "preserve_word_transform",
    "split_words",
    "to_camel_case",
    "to_delimited",
    "to_pascal_case",
    "to_sentence_case",
    "to_space_case",
    "to_title_case",
    "toggle_case",
]
