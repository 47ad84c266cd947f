"""Percent-encoding of URL components."""

from __future__ import annotations

from urllib.parse import quote, unquote


def url_encode(text: str | bytes) -> str:
    """Percent-encode everything except unreserved characters (A-Z a-z 0-9 - . _ ~)."""
    return quote(text, safe="")


def url_decode(text: str) -> str:
    """Decode ``%XX`` escapes; a ``+`` is left as it is."""
    return unquote(text)