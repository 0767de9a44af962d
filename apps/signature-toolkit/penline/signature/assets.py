"""Synthesised icon and logo assets embedded into signatures as data URIs.

Nothing here is fetched: every asset is a small SVG generated at import time
and encoded inline so a rendered signature never depends on remote images.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import quote

from .models import SocialPlatform, Theme

# Characters left untouched by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

ICON_STROKES: Mapping[Theme, str] = MappingProxyType(
    {
        Theme.LIGHT: "#6b7280",
        Theme.DARK: "#cbd5e1",
    }
)
"""Stroke colour of the social icon set rendered for each theme."""

_ICON_GLYPHS: Mapping[SocialPlatform, tuple[str, float]] = MappingProxyType(
    {
        SocialPlatform.LINKEDIN: ("in", 9),
        SocialPlatform.FACEBOOK: ("f", 9),
        SocialPlatform.TWITTER: ("X", 9),
        SocialPlatform.INSTAGRAM: ("ig", 9),
        SocialPlatform.WHATSAPP: ("wa", 8.5),
    }
)

_ICON_TEMPLATE = """
<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <rect x="2.5" y="2.5" width="19" height="19" rx="6" fill="none" stroke="{stroke}" stroke-width="1.5"/>
  <text x="12" y="14.1" text-anchor="middle" font-family="Arial, Helvetica, sans-serif" font-size="{size:g}" font-weight="700" fill="{stroke}">{glyph}</text>
</svg>"""

_DEMO_LOGO_SVG = """
<svg xmlns="http://www.w3.org/2000/svg" width="96" height="96" viewBox="0 0 96 96">
  <rect x="6" y="6" width="84" height="84" rx="18" fill="none" stroke="#111827" stroke-width="3"/>
  <path d="M28 60V34h12c7 0 12 4 12 13s-5 13-12 13H28Zm8-7h4c4 0 6-2 6-6s-2-6-6-6h-4v12Z" fill="#111827"/>
  <path d="M56 60V34h8v19h10v7H56Z" fill="#111827"/>
</svg>"""


def svg_data_uri(svg: str) -> str:
    """Percent-encode ``svg`` into a ``data:image/svg+xml`` URI.

    Newlines are dropped and spaces are kept literal, which keeps the URI short
    and readable inside ``src`` attributes.
    """

    encoded = quote(svg, safe=_URI_COMPONENT_SAFE).replace("%0A", "").replace("%20", " ")
    return f"data:image/svg+xml;charset=utf-8,{encoded}"


def logo_data_uri(content: bytes, mime_type: str = "image/png") -> str:
    """Encode uploaded logo bytes as a base64 ``data:`` URI."""

    payload = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def make_social_icons(stroke: str) -> Mapping[SocialPlatform, str]:
    """Build the five platform icons for a single stroke colour."""

    icons = {
        platform: svg_data_uri(_ICON_TEMPLATE.format(stroke=stroke, size=size, glyph=glyph))
        for platform, (glyph, size) in _ICON_GLYPHS.items()
    }
    return MappingProxyType(icons)


SOCIAL_ICONS: Mapping[Theme, Mapping[SocialPlatform, str]] = MappingProxyType(
    {theme: make_social_icons(stroke) for theme, stroke in ICON_STROKES.items()}
)
"""Icon data URIs keyed by theme, then by platform."""

DEMO_LOGO: str = svg_data_uri(_DEMO_LOGO_SVG)


__all__ = [
    "DEMO_LOGO",
    "ICON_STROKES",
    "SOCIAL_ICONS",
    "logo_data_uri",
    "make_social_icons",
    "svg_data_uri",
]
