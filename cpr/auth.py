"""Credentials for HTTP authentication."""

from __future__ import annotations

from enum import Enum, auto


class AuthMode(Enum):
    BASIC = auto()
    DIGEST = auto()
    NTLM = auto()


class Authentication:
    """A user name and password joined as ``user:password`` with an auth scheme."""

    __slots__ = ("_auth_string", "_auth_mode")

    def __init__(self, username: str, password: str, auth_mode: AuthMode) -> None:
        self._auth_string = f"{username}:{password}"
        self._auth_mode = auth_mode

    @property
    def auth_string(self) -> str:
        return self._auth_string

    @property
    def auth_mode(self) -> AuthMode:
        return self._auth_mode

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Authentication):
            return NotImplemented
        return (self._auth_string, self._auth_mode) == (other._auth_string, other._auth_mode)

    def __hash__(self) -> int:
        return hash((self._auth_string, self._auth_mode))

    def __repr__(self) -> str:
        return f"Authentication(<hidden>, {self._auth_mode.name})"


class Bearer:
    """A bearer token for the Authorization header."""

    __slots__ = ("_token",)

    def __init__(self, token: str) -> None:
        self._token = str(token)

    @property
    def token(self) -> str:
        return self._token

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bearer):
            return NotImplemented
        return self._token == other._token

    def __hash__(self) -> int:
        return hash(self._token)

    def __repr__(self) -> str:
        return "Bearer(<hidden>)"