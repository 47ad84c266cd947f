"""The result of a request."""

from __future__ import annotations

from dataclasses import dataclass, field

from cpr.cookies import Cookies
from cpr.errors import Error
from cpr.types import Header, Url


class CertInfo(list):
    """The lines of information about one certificate in the peer's chain."""

    __slots__ = ()


@dataclass
class Response:
    """Everything known about a completed request."""

    status_code: int = 0
    text: str = ""
    header: Header = field(default_factory=Header)
    url: Url = field(default_factory=Url)
    elapsed: float = 0.0
    cookies: Cookies = field(default_factory=Cookies)
    error: Error = field(default_factory=Error)
    raw_header: str = ""
    status_line: str = ""
    reason: str = ""
    uploaded_bytes: int = 0
    downloaded_bytes: int = 0
    redirect_count: int = 0
    cert_infos: list[CertInfo] = field(default_factory=list)