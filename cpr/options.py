"""Small request options: local port, low-speed limits, ranges, reserve size, proxies."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class LocalPort:
    """The local port to bind the connection to."""

    port: int

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"local port out of range: {self.port}")

    def __int__(self) -> int:
        return self.port


@dataclass
class LowSpeed:
    """Abort when the transfer stays below ``limit`` bytes/s for ``time`` seconds."""

    limit: int
    time: int


@dataclass
class ReserveSize:
    """The number of characters to reserve for the response body."""

    size: int = 0


@dataclass
class Range:
    """A byte range; an omitted start means 0, an omitted end means open."""

    resume_from: int | None = None
    finish_at: int | None = None

    def __post_init__(self) -> None:
        if self.resume_from is None:
            self.resume_from = 0
        if self.finish_at is None:
            self.finish_at = -1

    def __str__(self) -> str:
        start = "" if self.resume_from < 0 else str(self.resume_from)
        end = "" if self.finish_at < 0 else str(self.finish_at)
        return f"{start}-{end}"


class MultiRange:
    """Several byte ranges requested at once."""

    __slots__ = ("ranges",)

    def __init__(self, *args: Range) -> None:
        self.ranges: tuple[Range, ...] = args

    def __str__(self) -> str:
        return ", ".join(str(r) for r in self.ranges)

    def __repr__(self) -> str:
        return f"MultiRange{self.ranges!r}"


class Proxies(Mapping):
    """Proxy hosts keyed by protocol."""

    def __init__(self, hosts: Mapping[str, str] | None = None) -> None:
        self._hosts: dict[str, str] = dict(hosts or {})

    def has(self, protocol: str) -> bool:
        return protocol in self._hosts

    def __getitem__(self, protocol: str) -> str:
        return self._hosts[protocol]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._hosts))

    def __len__(self) -> int:
        return len(self._hosts)

    def __repr__(self) -> str:
        return f"Proxies({self._hosts!r})"