"""Markup escaping for values interpolated into signature HTML."""

from __future__ import annotations

import html


def escape_html(value: object | None) -> str:
    """Escape ``& < > " '`` so user text is safe in text nodes and attributes.

    ``html.escape`` replaces ``&`` before the other characters, so entities it
    introduces are never escaped twice. Single quotes are emitted as ``&#039;``.
    """

    return html.escape(str(value or ""), quote=True).replace("&#x27;", "&#039;")


__all__ = ["escape_html"]
