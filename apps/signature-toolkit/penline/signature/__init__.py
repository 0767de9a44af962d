"""Email signature builder: contact records in, table-based HTML out."""

from __future__ import annotations

from .assets import DEMO_LOGO, SOCIAL_ICONS, logo_data_uri, make_social_icons, svg_data_uri
from .builder import PALETTES, Palette, build_preview_document, build_signature_html
from .demo import DEMO_RECORD
from .escaping import escape_html
from .models import ContactRecord, SignatureOptions, SocialPlatform, Theme
from .urls import normalize_url
from .validators import (
    ValidationReport,
    is_email,
    is_phone,
    is_url_or_domain,
    validate_contact_record,
)

__all__ = [
    "ContactRecord",
    "DEMO_LOGO",
    "DEMO_RECORD",
    "PALETTES",
    "Palette",
    "SOCIAL_ICONS",
    "SignatureOptions",
    "SocialPlatform",
    "Theme",
    "ValidationReport",
    "build_preview_document",
    "build_signature_html",
    "escape_html",
    "is_email",
    "is_phone",
    "is_url_or_domain",
    "logo_data_uri",
    "make_social_icons",
    "normalize_url",
    "svg_data_uri",
    "validate_contact_record",
]
