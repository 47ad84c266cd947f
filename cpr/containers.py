"""Query parameters, form payloads and in-memory upload buffers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from cpr.encoding import url_encode


@dataclass(frozen=True)
class Parameter:
    """A query parameter; an empty value sends the key alone."""

    key: str
    value: str = ""


@dataclass(frozen=True)
class Pair:
    """A form field."""

    key: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            object.__setattr__(self, "value", str(self.value))


class CurlContainer:
    """An ordered list of key/value items; values are URL-encoded unless ``encode`` is False."""

    _item_type: ClassVar[type] = object

    def __init__(self, *args: Any) -> None:
        self._items: list = [self._coerce(item) for item in args]
        self.encode = True

    def _coerce(self, item: Any) -> Any:
        if isinstance(item, tuple) and self._item_type is not object:
            return self._item_type(*item)
        if isinstance(item, self._item_type):
            return item
        raise TypeError(f"{type(self).__name__} cannot hold {item!r}")

    def add(self, *args: Any) -> None:
        self._items.extend(self._coerce(item) for item in args)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}{tuple(self._items)!r}"


class Parameters(CurlContainer):
    """URL query parameters."""

    _item_type = Parameter

    def content(self) -> str:
        """The query string, e.g. ``key=value&flag``."""
        parts = []
        for param in self._items:
            key = url_encode(param.key) if self.encode else param.key
            if not param.value:
                parts.append(key)
            else:
                value = url_encode(param.value) if self.encode else param.value
                parts.append(f"{key}={value}")
        return "&".join(parts)


class Payload(CurlContainer):
    """An ``application/x-www-form-urlencoded`` body."""

    _item_type = Pair

    def content(self) -> str:
        """The form body; only values are encoded."""
        return "&".join(
            f"{pair.key}={url_encode(pair.value) if self.encode else pair.value}" for pair in self._items
        )


@dataclass(frozen=True)
class Buffer:
    """In-memory bytes uploaded as a file with the given name."""

    data: bytes
    filename: Path

    def __post_init__(self) -> None:
        if isinstance(self.data, str):
            raise TypeError("Only byte buffers can be used")
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "filename", Path(self.filename))

    @property
    def datalen(self) -> int:
        return len(self.data)