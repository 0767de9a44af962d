"""Compose email-client-safe signature HTML from a contact record.

Email clients only render nested tables with inline styles reliably, so the
output avoids flow containers beyond the name/title/company ``div`` stack and
never references external stylesheets or images.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .assets import SOCIAL_ICONS
from .escaping import escape_html
from .models import ContactRecord, SignatureOptions, SocialPlatform, Theme
from .urls import normalize_url, strip_http_scheme

logger = logging.getLogger(__name__)

FONT_STACK = "Arial, Helvetica, sans-serif"

BASE_TD_STYLE = (
    f"font-family:{FONT_STACK}; text-align:left; mso-line-height-rule:exactly; "
    "-webkit-text-size-adjust:100%; -ms-text-size-adjust:100%;"
)

_TABLE_ATTRS = 'role="presentation" cellpadding="0" cellspacing="0" border="0"'


@dataclass(frozen=True, slots=True)
class Palette:
    """Four-step text colour ramp, strongest first."""

    black: str
    gray600: str
    gray500: str
    gray400: str


PALETTES: Mapping[Theme, Palette] = MappingProxyType(
    {
        Theme.LIGHT: Palette(
            black="#111827", gray600="#4b5563", gray500="#6b7280", gray400="#9ca3af"
        ),
        Theme.DARK: Palette(
            black="#f8fafc", gray600="#e5e7eb", gray500="#cbd5e1", gray400="#94a3b8"
        ),
    }
)

PREVIEW_BACKGROUNDS: Mapping[Theme, str] = MappingProxyType(
    {Theme.LIGHT: "#ffffff", Theme.DARK: "#0b0b0f"}
)


@dataclass(frozen=True, slots=True)
class _SocialLink:
    platform: SocialPlatform
    url: str


def _text(value: str) -> str:
    return str(value or "").strip()


def _join_present(parts: tuple[str, ...], separator: str) -> str:
    return separator.join(part for part in parts if part)


def _table(body: str) -> str:
    return (
        f'<table {_TABLE_ATTRS} style="border-collapse:collapse; {BASE_TD_STYLE}">'
        f"{body}</table>"
    )


def _contact_row(inner_html: str, palette: Palette) -> str:
    if not inner_html:
        return ""
    return f"""
<tr>
  <td style="padding:2px 0; {BASE_TD_STYLE} font-size:14px; line-height:18px; color:{palette.gray600};">{inner_html}</td>
</tr>"""


def _link(href: str, text: str, palette: Palette) -> str:
    return (
        f'<a href="{escape_html(href)}" style="color:{palette.gray600}; text-decoration:none;">'
        f"{escape_html(text)}</a>"
    )


def _phone_html(label: str, number: str, palette: Palette) -> str:
    if not number:
        return ""
    return f'<span style="color:{palette.gray500};">{label}:</span> ' + _link(
        f"tel:{number}", number, palette
    )


def _identity_stack(full_name: str, job_line: str, company: str, palette: Palette) -> str:
    blocks: list[str] = []
    if full_name:
        blocks.append(
            f'<div style="{BASE_TD_STYLE} font-size:18px; line-height:22px; font-weight:700; '
            f'color:{palette.black};">{escape_html(full_name)}</div>'
        )
    if job_line:
        blocks.append(
            f'<div style="{BASE_TD_STYLE} padding-top:2px; font-size:14px; line-height:18px; '
            f'color:{palette.gray600};">{escape_html(job_line)}</div>'
        )
    if company:
        blocks.append(
            f'<div style="{BASE_TD_STYLE} padding-top:2px; font-size:14px; line-height:18px; '
            f'color:{palette.gray400};">{escape_html(company)}</div>'
        )
    return "\n".join(blocks)


def _header_block(logo_src: str, identity: str) -> str:
    if not logo_src:
        return f"\n{identity}"
    body = f"""
  <tr>
    <td style="vertical-align:top; padding-right:12px;">
      <img src="{escape_html(logo_src)}" width="48" height="48" style="display:block; border:0; outline:none; text-decoration:none; border-radius:10px;" alt="" />
    </td>
    <td style="vertical-align:top; {BASE_TD_STYLE}">
      {identity}
    </td>
  </tr>
"""
    return "\n" + _table(body)


def _socials_row(links: list[_SocialLink], theme: Theme) -> str:
    if not links:
        return ""
    icons = SOCIAL_ICONS[theme]
    cells = "".join(
        f'<td style="padding-right:8px;"><a href="{escape_html(link.url)}" '
        'style="text-decoration:none;" target="_blank" rel="noopener noreferrer">'
        f'<img src="{escape_html(icons[link.platform])}" width="24" height="24" '
        'style="display:block; border:0; outline:none; text-decoration:none;" '
        f'alt="{escape_html(link.platform.label)}" /></a></td>'
        for link in links
    )
    inner = _table(f"\n      <tr>\n        {cells}\n      </tr>\n    ")
    return f"""
<tr>
  <td style="padding-top:10px; {BASE_TD_STYLE}">
    {inner}
  </td>
</tr>"""


def _legal_row(legal: str, palette: Palette) -> str:
    if not legal:
        return ""
    content = escape_html(legal).replace("\n", "<br/>")
    return f"""
<tr>
  <td style="padding-top:12px; {BASE_TD_STYLE} font-size:11px; line-height:15px; color:{palette.gray400}; max-width:420px;">{content}</td>
</tr>"""


def resolve_logo_source(record: ContactRecord) -> str:
    """Prefer an embedded data-URI logo over a remote logo URL."""

    embedded = _text(record.logo_data_url)
    if embedded:
        return embedded
    remote = _text(record.logo_url)
    return normalize_url(remote) if remote else ""


def build_signature_html(
    record: ContactRecord | Mapping[str, object],
    options: SignatureOptions | Mapping[str, object] | None = None,
) -> str:
    """Render ``record`` as a self-contained HTML signature fragment.

    Every optional piece (logo, contact rows, social icons, legal text) is
    emitted only when its source field is non-empty after trimming. The record
    is never modified.
    """

    if not isinstance(record, ContactRecord):
        record = ContactRecord.from_mapping(record)
    if options is None:
        options = SignatureOptions()
    elif not isinstance(options, SignatureOptions):
        options = SignatureOptions.model_validate(dict(options))

    theme = options.theme
    palette = PALETTES[theme]

    full_name = _join_present((_text(record.first_name), _text(record.last_name)), " ")
    job_line = _join_present((_text(record.job_title), _text(record.department)), " • ")
    company = _text(record.company_name)
    office_phone = _text(record.office_phone)
    mobile_phone = _text(record.mobile_phone)
    email = _text(record.email_address)
    website_raw = _text(record.website_url)
    address = _text(record.address)
    legal = _text(record.legal)

    logo_src = resolve_logo_source(record)
    website = normalize_url(website_raw) if website_raw else ""

    socials = [
        _SocialLink(platform, normalize_url(record.social_url(platform)))
        for platform in SocialPlatform
    ]
    socials = [link for link in socials if link.url]

    email_html = _link(f"mailto:{email}", email, palette) if email else ""
    web_html = _link(website, strip_http_scheme(website), palette) if website else ""
    address_html = (
        f'<span style="color:{palette.gray600};">{escape_html(address)}</span>' if address else ""
    )
    contact_rows = [
        _phone_html("Office", office_phone, palette),
        _phone_html("Mobile", mobile_phone, palette),
        email_html,
        web_html,
        address_html,
    ]
    rows_html = "\n              ".join(_contact_row(row, palette) for row in contact_rows if row)

    identity = _identity_stack(full_name, job_line, company, palette)
    header = _header_block(logo_src, identity)

    document = f"""
<table {_TABLE_ATTRS} style="border-collapse:collapse; {BASE_TD_STYLE}">
  <tr>
    <td style="padding:0; {BASE_TD_STYLE}">
      <table {_TABLE_ATTRS} style="border-collapse:collapse; {BASE_TD_STYLE}">
        <tr>
          <td style="padding:0; {BASE_TD_STYLE}">{header}</td>
        </tr>

        <tr>
          <td style="padding-top:10px; {BASE_TD_STYLE}">
            <table {_TABLE_ATTRS} style="border-collapse:collapse; {BASE_TD_STYLE}">
              {rows_html}
            </table>
          </td>
        </tr>

        {_socials_row(socials, theme)}

        {_legal_row(legal, palette)}
      </table>
    </td>
  </tr>
</table>
""".strip()

    logger.debug(
        "Rendered %s signature (logo=%s, contact_rows=%d, socials=%d, legal=%s)",
        theme.value,
        bool(logo_src),
        sum(1 for row in contact_rows if row),
        len(socials),
        bool(legal),
    )
    return document


def build_preview_document(signature_html: str, theme: Theme | str = Theme.LIGHT) -> str:
    """Wrap a signature fragment in a minimal standalone HTML page."""

    background = PREVIEW_BACKGROUNDS[Theme.coerce(theme)]
    return (
        '<!doctype html><html><head><meta charset="utf-8" />'
        '<meta name="viewport" content="width=device-width, initial-scale=1" /></head>'
        f'<body style="margin:0;padding:16px;background:{background};">{signature_html}'
        "</body></html>"
    )


__all__ = [
    "BASE_TD_STYLE",
    "FONT_STACK",
    "PALETTES",
    "PREVIEW_BACKGROUNDS",
    "Palette",
    "build_preview_document",
    "build_signature_html",
    "resolve_logo_source",
]
