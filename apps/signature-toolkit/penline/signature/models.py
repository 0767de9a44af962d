"""Contact record and rendering option models for the signature builder."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Theme(str, Enum):
    """Palette and icon variant used when rendering a signature."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def coerce(cls, value: Theme | str | None) -> Theme:
        """Return ``DARK`` only when explicitly requested, ``LIGHT`` otherwise."""

        if isinstance(value, Theme):
            return value
        if str(value or "").strip().lower() == cls.DARK.value:
            return cls.DARK
        return cls.LIGHT


class SocialPlatform(str, Enum):
    """Social profiles rendered as icon links, in display order."""

    LINKEDIN = "linkedin"
    FACEBOOK = "facebook"
    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    WHATSAPP = "whatsapp"

    @property
    def label(self) -> str:
        return SOCIAL_LABELS[self]


SOCIAL_LABELS: Mapping[SocialPlatform, str] = MappingProxyType(
    {
        SocialPlatform.LINKEDIN: "LinkedIn",
        SocialPlatform.FACEBOOK: "Facebook",
        SocialPlatform.TWITTER: "X",
        SocialPlatform.INSTAGRAM: "Instagram",
        SocialPlatform.WHATSAPP: "WhatsApp",
    }
)


class ContactRecord(BaseModel):
    """Flat set of optional text fields describing the signature owner.

    Every field defaults to an empty string; the builder renders each piece
    only when it is non-empty after trimming. Payloads may use either the
    snake_case attribute names or the camelCase keys of the web form.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    first_name: str = ""
    last_name: str = ""
    job_title: str = ""
    department: str = ""
    company_name: str = ""
    office_phone: str = ""
    mobile_phone: str = ""
    website_url: str = ""
    email_address: str = ""
    address: str = ""
    logo_url: str = ""
    logo_data_url: str = ""
    linkedin: str = ""
    facebook: str = ""
    twitter: str = ""
    instagram: str = ""
    whatsapp: str = ""
    legal: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, float) and math.isnan(value):
            return ""
        if isinstance(value, str):
            return value
        return str(value)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> ContactRecord:
        """Build a record from a loosely-typed mapping (form payload, sheet row)."""

        return cls.model_validate(dict(payload))

    def social_url(self, platform: SocialPlatform) -> str:
        return str(getattr(self, platform.value))

    def to_dict(self, *, by_alias: bool = False) -> dict[str, str]:
        return self.model_dump(by_alias=by_alias)


class SignatureOptions(BaseModel):
    """Rendering options accepted by :func:`build_signature_html`."""

    model_config = ConfigDict(frozen=True)

    theme: Theme = Field(default=Theme.LIGHT)

    @field_validator("theme", mode="before")
    @classmethod
    def _coerce_theme(cls, value: Any) -> Theme:
        return Theme.coerce(value)


__all__ = [
    "ContactRecord",
    "SOCIAL_LABELS",
    "SignatureOptions",
    "SocialPlatform",
    "Theme",
]
