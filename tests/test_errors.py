import pytest

from cpr.errors import Error, ErrorCode, error_code_for_curl_error


@pytest.mark.parametrize(
    ("curl_code", "expected"),
    [
        (0, ErrorCode.OK),
        (6, ErrorCode.COULDNT_RESOLVE_HOST),
        (7, ErrorCode.COULDNT_CONNECT),
        (28, ErrorCode.OPERATION_TIMEDOUT),
        (47, ErrorCode.TOO_MANY_REDIRECTS),
        (100, ErrorCode.TOO_LARGE),
    ],
)
def test_known_curl_codes(curl_code, expected):
    assert error_code_for_curl_error(curl_code) is expected


@pytest.mark.parametrize("curl_code", [-1, 10, 20, 9999])
def test_unknown_curl_codes(curl_code):
    assert error_code_for_curl_error(curl_code) is ErrorCode.UNKNOWN_ERROR


def test_mapping_is_one_to_one():
    mapped = [error_code_for_curl_error(code) for code in range(0, 128)]
    known = [code for code in mapped if code is not ErrorCode.UNKNOWN_ERROR]
    assert len(known) == len(set(known))
    assert set(known) | {ErrorCode.UNKNOWN_ERROR} == set(ErrorCode)


def test_default_error_is_falsy():
    error = Error()
    assert not error
    assert error.code is ErrorCode.OK
    assert error.message == ""


def test_error_with_code_is_truthy():
    assert Error(ErrorCode.COULDNT_CONNECT, "failed")


def test_from_curl():
    error = Error.from_curl(7, "failed")
    assert error.code is ErrorCode.COULDNT_CONNECT
    assert error.message == "failed"
    assert not Error.from_curl(0)