"""Transfer error codes and their mapping from libcurl result codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType


class ErrorCode(Enum):
    OK = auto()
    UNSUPPORTED_PROTOCOL = auto()
    FAILED_INIT = auto()
    URL_MALFORMAT = auto()
    NOT_BUILT_IN = auto()
    COULDNT_RESOLVE_PROXY = auto()
    COULDNT_RESOLVE_HOST = auto()
    COULDNT_CONNECT = auto()
    WEIRD_SERVER_REPLY = auto()
    REMOTE_ACCESS_DENIED = auto()
    HTTP2 = auto()
    PARTIAL_FILE = auto()
    QUOTE_ERROR = auto()
    HTTP_RETURNED_ERROR = auto()
    WRITE_ERROR = auto()
    UPLOAD_FAILED = auto()
    READ_ERROR = auto()
    OUT_OF_MEMORY = auto()
    OPERATION_TIMEDOUT = auto()
    RANGE_ERROR = auto()
    HTTP_POST_ERROR = auto()
    SSL_CONNECT_ERROR = auto()
    BAD_DOWNLOAD_RESUME = auto()
    FILE_COULDNT_READ_FILE = auto()
    FUNCTION_NOT_FOUND = auto()
    ABORTED_BY_CALLBACK = auto()
    BAD_FUNCTION_ARGUMENT = auto()
    INTERFACE_FAILED = auto()
    TOO_MANY_REDIRECTS = auto()
    UNKNOWN_OPTION = auto()
    SETOPT_OPTION_SYNTAX = auto()
    GOT_NOTHING = auto()
    SSL_ENGINE_NOTFOUND = auto()
    SSL_ENGINE_SETFAILED = auto()
    SEND_ERROR = auto()
    RECV_ERROR = auto()
    SSL_CERTPROBLEM = auto()
    SSL_CIPHER = auto()
    PEER_FAILED_VERIFICATION = auto()
    BAD_CONTENT_ENCODING = auto()
    FILESIZE_EXCEEDED = auto()
    USE_SSL_FAILED = auto()
    SEND_FAIL_REWIND = auto()
    SSL_ENGINE_INITFAILED = auto()
    LOGIN_DENIED = auto()
    SSL_CACERT_BADFILE = auto()
    SSL_SHUTDOWN_FAILED = auto()
    AGAIN = auto()
    SSL_CRL_BADFILE = auto()
    SSL_ISSUER_ERROR = auto()
    CHUNK_FAILED = auto()
    NO_CONNECTION_AVAILABLE = auto()
    SSL_PINNEDPUBKEYNOTMATCH = auto()
    SSL_INVALIDCERTSTATUS = auto()
    HTTP2_STREAM = auto()
    RECURSIVE_API_CALL = auto()
    AUTH_ERROR = auto()
    HTTP3 = auto()
    QUIC_CONNECT_ERROR = auto()
    PROXY = auto()
    SSL_CLIENTCERT = auto()
    UNRECOVERABLE_POLL = auto()
    TOO_LARGE = auto()
    UNKNOWN_ERROR = auto()


_CURL_ERRORS = MappingProxyType(
    {
        0: ErrorCode.OK,
        1: ErrorCode.UNSUPPORTED_PROTOCOL,
        2: ErrorCode.FAILED_INIT,
        3: ErrorCode.URL_MALFORMAT,
        4: ErrorCode.NOT_BUILT_IN,
        5: ErrorCode.COULDNT_RESOLVE_PROXY,
        6: ErrorCode.COULDNT_RESOLVE_HOST,
        7: ErrorCode.COULDNT_CONNECT,
        8: ErrorCode.WEIRD_SERVER_REPLY,
        9: ErrorCode.REMOTE_ACCESS_DENIED,
        16: ErrorCode.HTTP2,
        18: ErrorCode.PARTIAL_FILE,
        21: ErrorCode.QUOTE_ERROR,
        22: ErrorCode.HTTP_RETURNED_ERROR,
        23: ErrorCode.WRITE_ERROR,
        25: ErrorCode.UPLOAD_FAILED,
        26: ErrorCode.READ_ERROR,
        27: ErrorCode.OUT_OF_MEMORY,
        28: ErrorCode.OPERATION_TIMEDOUT,
        33: ErrorCode.RANGE_ERROR,
        34: ErrorCode.HTTP_POST_ERROR,
        35: ErrorCode.SSL_CONNECT_ERROR,
        36: ErrorCode.BAD_DOWNLOAD_RESUME,
        37: ErrorCode.FILE_COULDNT_READ_FILE,
        41: ErrorCode.FUNCTION_NOT_FOUND,
        42: ErrorCode.ABORTED_BY_CALLBACK,
        43: ErrorCode.BAD_FUNCTION_ARGUMENT,
        45: ErrorCode.INTERFACE_FAILED,
        47: ErrorCode.TOO_MANY_REDIRECTS,
        48: ErrorCode.UNKNOWN_OPTION,
        49: ErrorCode.SETOPT_OPTION_SYNTAX,
        52: ErrorCode.GOT_NOTHING,
        53: ErrorCode.SSL_ENGINE_NOTFOUND,
        54: ErrorCode.SSL_ENGINE_SETFAILED,
        55: ErrorCode.SEND_ERROR,
        56: ErrorCode.RECV_ERROR,
        58: ErrorCode.SSL_CERTPROBLEM,
        59: ErrorCode.SSL_CIPHER,
        60: ErrorCode.PEER_FAILED_VERIFICATION,
        61: ErrorCode.BAD_CONTENT_ENCODING,
        63: ErrorCode.FILESIZE_EXCEEDED,
        64: ErrorCode.USE_SSL_FAILED,
        65: ErrorCode.SEND_FAIL_REWIND,
        66: ErrorCode.SSL_ENGINE_INITFAILED,
        67: ErrorCode.LOGIN_DENIED,
        77: ErrorCode.SSL_CACERT_BADFILE,
        80: ErrorCode.SSL_SHUTDOWN_FAILED,
        81: ErrorCode.AGAIN,
        82: ErrorCode.SSL_CRL_BADFILE,
        83: ErrorCode.SSL_ISSUER_ERROR,
        88: ErrorCode.CHUNK_FAILED,
        89: ErrorCode.NO_CONNECTION_AVAILABLE,
        90: ErrorCode.SSL_PINNEDPUBKEYNOTMATCH,
        91: ErrorCode.SSL_INVALIDCERTSTATUS,
        92: ErrorCode.HTTP2_STREAM,
        93: ErrorCode.RECURSIVE_API_CALL,
        94: ErrorCode.AUTH_ERROR,
        95: ErrorCode.HTTP3,
        96: ErrorCode.QUIC_CONNECT_ERROR,
        97: ErrorCode.PROXY,
        98: ErrorCode.SSL_CLIENTCERT,
        99: ErrorCode.UNRECOVERABLE_POLL,
        100: ErrorCode.TOO_LARGE,
    }
)


def error_code_for_curl_error(curl_code: int) -> ErrorCode:
    """Map a libcurl result code to an ErrorCode; unknown codes give UNKNOWN_ERROR."""
    return _CURL_ERRORS.get(curl_code, ErrorCode.UNKNOWN_ERROR)


@dataclass
class Error:
    """The outcome of a transfer: a code and a human-readable message."""

    code: ErrorCode = ErrorCode.OK
    message: str = ""

    @classmethod
    def from_curl(cls, curl_code: int, message: str = "") -> Error:
        return cls(error_code_for_curl_error(curl_code), message)

    def __bool__(self) -> bool:
        return self.code is not ErrorCode.OK