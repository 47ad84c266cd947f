"""User callbacks invoked while a transfer is running."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Optional


@dataclass
class ReadCallback:
    """Supplies upload data.

    ``callback(size, userdata)`` is asked for up to ``size`` bytes and returns
    them; an empty result ends the upload and ``None`` aborts it. ``size`` on
    the callback object is the total upload size, or -1 if unknown.
    """

    callback: Callable[[int, Any], Optional[bytes]]
    size: int = -1
    userdata: Any = 0

    def __call__(self, size: int) -> Optional[bytes]:
        return self.callback(size, self.userdata)


@dataclass
class HeaderCallback:
    """Receives each response header line; return False to abort."""

    callback: Callable[[str, Any], bool]
    userdata: Any = 0

    def __call__(self, header: str) -> bool:
        return self.callback(header, self.userdata)


@dataclass
class WriteCallback:
    """Receives each chunk of the response body; return False to abort."""

    callback: Callable[[Any, Any], bool]
    userdata: Any = 0

    def __call__(self, data: Any) -> bool:
        return self.callback(data, self.userdata)


@dataclass
class ProgressCallback:
    """Receives transfer progress; return False to abort."""

    callback: Callable[[int, int, int, int, Any], bool]
    userdata: Any = 0

    def __call__(self, download_total: int, download_now: int, upload_total: int, upload_now: int) -> bool:
        return self.callback(download_total, download_now, upload_total, upload_now, self.userdata)


class InfoType(IntEnum):
    TEXT = 0
    HEADER_IN = 1
    HEADER_OUT = 2
    DATA_IN = 3
    DATA_OUT = 4
    SSL_DATA_IN = 5
    SSL_DATA_OUT = 6


@dataclass
class DebugCallback:
    """Receives debug information about the transfer."""

    callback: Callable[[InfoType, str, Any], None]
    userdata: Any = 0

    def __call__(self, info_type: InfoType, data: str) -> None:
        self.callback(InfoType(info_type), data, self.userdata)


class CancellationCallback:
    """A progress function that stops the transfer once cancellation is requested."""

    __slots__ = ("cancellation_state", "_user_cb")

    def __init__(
        self,
        cancellation_state: threading.Event | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        self.cancellation_state = cancellation_state if cancellation_state is not None else threading.Event()
        self._user_cb = progress_callback

    def set_progress_callback(self, callback: ProgressCallback) -> None:
        self._user_cb = callback

    def __call__(self, download_total: int, download_now: int, upload_total: int, upload_now: int) -> bool:
        keep_going = not self.cancellation_state.is_set()
        if self._user_cb is None:
            return keep_going
        return keep_going and bool(self._user_cb(download_total, download_now, upload_total, upload_now))