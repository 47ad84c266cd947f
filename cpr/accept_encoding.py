"""The set of content encodings to announce in Accept-Encoding."""

from __future__ import annotations

from enum import Enum


class AcceptEncodingMethods(Enum):
    identity = "identity"
    deflate = "deflate"
    zlib = "zlib"
    gzip = "gzip"
    disabled = "disabled"


class AcceptEncoding:
    """An ordered, duplicate-free set of encoding names."""

    __slots__ = ("_methods",)

    def __init__(self, *args: AcceptEncodingMethods | str) -> None:
        methods: dict[str, None] = {}
        for method in args:
            if isinstance(method, AcceptEncodingMethods):
                methods[method.value] = None
            elif isinstance(method, str):
                methods[method] = None
            else:
                raise TypeError(f"unsupported encoding method: {method!r}")
        self._methods = tuple(methods)

    @property
    def methods(self) -> tuple[str, ...]:
        return self._methods

    def is_disabled(self) -> bool:
        """True if encoding is switched off; 'disabled' may not be mixed with others."""
        if AcceptEncodingMethods.disabled.value in self._methods:
            if len(self._methods) != 1:
                raise ValueError(
                    "AcceptEncoding does not accept any other values if 'disabled' is present. "
                    "You set the following encodings: " + str(self)
                )
            return True
        return False

    def __str__(self) -> str:
        return ", ".join(self._methods)

    def __bool__(self) -> bool:
        return bool(self._methods)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AcceptEncoding):
            return NotImplemented
        return set(self._methods) == set(other._methods)

    def __hash__(self) -> int:
        return hash(frozenset(self._methods))

    def __repr__(self) -> str:
        return f"AcceptEncoding{self._methods!r}"