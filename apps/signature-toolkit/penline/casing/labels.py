"""Display names for the transform keys in the two supported locales."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from .engine import TransformKey


class Locale(str, Enum):
    EN = "en"
    RU = "ru"


TRANSFORM_LABELS: Mapping[Locale, Mapping[TransformKey, str]] = MappingProxyType(
    {
        Locale.EN: MappingProxyType(
            {
                TransformKey.UPPER: "UPPERCASE",
                TransformKey.LOWER: "lowercase",
                TransformKey.TITLE: "Title Case",
                TransformKey.SENTENCE: "Sentence case",
                TransformKey.TOGGLE: "tOGGLE cASE",
                TransformKey.ALTERNATING: "aLtErNaTiNg",
                TransformKey.CAMEL: "camelCase",
                TransformKey.PASCAL: "PascalCase",
                TransformKey.SNAKE: "snake_case",
                TransformKey.KEBAB: "kebab-case",
                TransformKey.DOT: "dot.case",
                TransformKey.SPACE: "space case",
            }
        ),
        Locale.RU: MappingProxyType(
            {
                TransformKey.UPPER: "ВСЕ ЗАГЛАВНЫЕ",
                TransformKey.LOWER: "все строчные",
                TransformKey.TITLE: "Каждое Слово С Заглавной",
                TransformKey.SENTENCE: "Как в предложении",
                TransformKey.TOGGLE: "иНВЕРСИЯ рЕГИСТРА",
                TransformKey.ALTERNATING: "чЕрЕдОвАнИе",
                TransformKey.CAMEL: "camelCase",
                TransformKey.PASCAL: "PascalCase",
                TransformKey.SNAKE: "snake_case",
                TransformKey.KEBAB: "kebab-case",
                TransformKey.DOT: "dot.case",
                TransformKey.SPACE: "разделить пробелами",
            }
        ),
    }
)


def transform_label(key: TransformKey | str, locale: Locale | str = Locale.EN) -> str:
    return TRANSFORM_LABELS[Locale(locale)][TransformKey(key)]


__all__ = ["Locale", "TRANSFORM_LABELS", "transform_label"]
