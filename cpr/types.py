"""Core value types: string holders and a case-insensitive header map."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def case_insensitive_less(a: str, b: str) -> bool:
    """Return True if ``a`` sorts before ``b`` when ASCII case is ignored."""
    return _fold(a) < _fold(b)


class StringHolder:
    """An immutable wrapper around a string; parts given are concatenated."""

    __slots__ = ("_value",)

    def __init__(self, *parts: Any) -> None:
        self._value = "".join(str(part) for part in parts)

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringHolder):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: object) -> StringHolder:
        if isinstance(other, (StringHolder, str)):
            return type(self)(self._value + str(other))
        return NotImplemented


class Url(StringHolder):
    """A request URL."""

    __slots__ = ()


class Interface(StringHolder):
    """The name of the network interface to send requests from."""

    __slots__ = ()


class Header(MutableMapping):
    """A header map with case-insensitive keys, ordered case-insensitively.

    The spelling of a key is the one it was first inserted with.
    """

    def __init__(self, data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._items: dict[str, tuple[str, str]] = {}
        if data is None:
            return
        pairs = data.items() if isinstance(data, Mapping) else data
        for key, value in pairs:
            folded = _fold(key)
            if folded not in self._items:
                self._items[folded] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._items[_fold(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        folded = _fold(key)
        existing = self._items.get(folded)
        self._items[folded] = (existing[0] if existing else key, value)

    def __delitem__(self, key: str) -> None:
        folded = _fold(key)
        if folded not in self._items:
            raise KeyError(key)
        self._items.pop(folded)

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._items):
            yield self._items[folded][0]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _fold(key) in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return {_fold(k): v for k, v in self.items()} == {_fold(k): v for k, v in other.items()}

    def copy(self) -> Header:
        return Header(self.items())

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"