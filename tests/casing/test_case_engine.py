from __future__ import annotations

import pytest
from penline.casing import HANDLERS, TransformFamily, TransformKey, compute_output

from tests.helpers.assertions import expect


def test_handlers_cover_every_transform_key() -> None:
    expect(set(HANDLERS) == set(TransformKey), "every key should have a handler")
    expect(len(TransformKey) == 12, "twelve transforms are supported")


def test_transform_families() -> None:
    case_keys = {key for key in TransformKey if key.family is TransformFamily.CASE}

    expect(
        case_keys
        == {
            TransformKey.UPPER,
            TransformKey.LOWER,
            TransformKey.TITLE,
            TransformKey.SENTENCE,
            TransformKey.TOGGLE,
            TransformKey.ALTERNATING,
        },
        "case family membership",
    )


@pytest.mark.parametrize("key", list(TransformKey))
@pytest.mark.parametrize("preserve", [True, False])
def test_empty_input_yields_empty_output(key: TransformKey, preserve: bool) -> None:
    expect(compute_output("", preserve, key) == "", f"{key.value} on empty input")


def test_upper_preserve_only_touches_word_tokens() -> None:
    text = "  hello,   world!  "

    expect(compute_output(text, True, "upper") == "  HELLO,   WORLD!  ", "layout is kept")
    expect(compute_output(text, False, "upper") == "HELLO,   WORLD!", "text is trimmed")


def test_lower_preserve_keeps_punctuation_and_spacing() -> None:
    expect(compute_output(" ABC,  DEF! ", True, "lower") == " abc,  def! ", "layout is kept")
    expect(compute_output(" ABC,  DEF! ", False, "lower") == "abc,  def!", "text is trimmed")


@pytest.mark.parametrize(
    ("key", "preserved", "trimmed"),
    [
        ("title", "  Hello World  ", "Hello World"),
        ("sentence", "  Hello world  ", "Hello world"),
        ("toggle", "  HELLO WORLD  ", "HELLO WORLD"),
        ("alternating", "  hElLo WoRlD  ", "hElLo WoRlD"),
    ],
)
def test_preserve_flag_controls_trimming(key: str, preserved: str, trimmed: str) -> None:
    text = "  hello world  "

    expect(compute_output(text, True, key) == preserved, f"{key} keeps outer whitespace")
    expect(compute_output(text, False, key) == trimmed, f"{key} trims outer whitespace")


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("camel", "helloWorld"),
        ("pascal", "HelloWorld"),
        ("snake", "hello_world"),
        ("kebab", "hello-world"),
        ("dot", "hello.world"),
        ("space", "Hello world"),
    ],
)
def test_delimiter_family_ignores_preserve_flag(key: str, expected: str) -> None:
    for preserve in (True, False):
        expect(
            compute_output("  Hello, world!  ", preserve, key) == expected,
            f"{key} (preserve={preserve}) should give {expected!r}",
        )


def test_compute_output_treats_none_as_empty() -> None:
    expect(compute_output(None, True, TransformKey.SNAKE) == "", "None is empty input")


def test_unknown_transform_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        compute_output("text", True, "shout")


def test_title_preserve_skips_leading_numeric_signs() -> None:
    result = compute_output("²nd place", True, "title")

    expect(result == "²Nd Place", f"token should start at the letter: {result!r}")
