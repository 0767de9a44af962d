"""URL helpers shared by the signature builder and its validators."""

from __future__ import annotations

import re

_KNOWN_SCHEME = re.compile(r"^(mailto:|tel:|https?://)", re.IGNORECASE)
_HTTP_PREFIX = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(raw: object | None) -> str:
    """Return ``raw`` with an ``https://`` prefix unless it already carries a scheme.

    Empty input yields an empty string, which callers treat as "field absent".
    No domain validation happens here.
    """

    text = str(raw or "").strip()
    if not text:
        return ""
    if _KNOWN_SCHEME.match(text):
        return text
    return f"https://{text}"


def strip_http_scheme(url: str) -> str:
    """Drop a leading ``http://`` or ``https://`` for display purposes."""

    return _HTTP_PREFIX.sub("", url, count=1)


__all__ = ["normalize_url", "strip_http_scheme"]
