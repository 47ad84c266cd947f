"""Cookies sent with a request or received in a response."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import overload

from cpr.encoding import url_encode

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _to_utc(value: datetime | int | float) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime.fromtimestamp(value, timezone.utc)


@dataclass
class Cookie:
    """A single cookie; ``expires`` may be given as a datetime or POSIX seconds."""

    name: str
    value: str
    domain: str = ""
    include_subdomains: bool = False
    path: str = "/"
    https_only: bool = False
    expires: datetime = field(default=_EPOCH)

    def __post_init__(self) -> None:
        self.expires = _to_utc(self.expires)

    def expires_string(self) -> str:
        """The expiry date in HTTP date format, e.g. ``Thu, 01 Jan 1970 00:00:00 GMT``."""
        return format_datetime(self.expires, usegmt=True)


class Cookies(MutableSequence):
    """An ordered list of cookies, URL-encoded when sent unless ``encode`` is False."""

    def __init__(self, cookies: Iterable[Cookie] | None = None, encode: bool = True) -> None:
        self._cookies: list[Cookie] = list(cookies or ())
        self.encode = encode

    @overload
    def __getitem__(self, index: int) -> Cookie: ...

    @overload
    def __getitem__(self, index: slice) -> list[Cookie]: ...

    def __getitem__(self, index):
        return self._cookies[index]

    def __setitem__(self, index, value) -> None:
        self._cookies[index] = value

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            doomed = set(range(len(self._cookies))[index])
            self._cookies = [c for i, c in enumerate(self._cookies) if i not in doomed]
        else:
            self._cookies.pop(index)

    def __len__(self) -> int:
        return len(self._cookies)

    def insert(self, index: int, value: Cookie) -> None:
        self._cookies.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookies):
            return NotImplemented
        return self._cookies == other._cookies and self.encode == other.encode

    def __repr__(self) -> str:
        return f"Cookies({self._cookies!r}, encode={self.encode})"

    def get_encoded(self) -> str:
        """The Cookie header value: ``name=value; `` for each cookie."""
        parts = []
        for cookie in self._cookies:
            name = url_encode(cookie.name) if self.encode else cookie.name
            value = cookie.value
            # Version 1 cookies are quoted and sent as they are.
            quoted = len(value) >= 1 and value[0] == '"' and value[-1] == '"'
            if not quoted and self.encode:
                value = url_encode(value)
            parts.append(f"{name}={value}; ")
        return "".join(parts)