import pytest

from cpr.encoding import url_decode, url_encode


def test_space_is_percent_encoded():
    assert url_encode("hello world") == "hello%20world"


def test_special_characters_use_upper_hex():
    assert url_encode("%$") == "%25%24"


def test_unreserved_characters_unchanged():
    unreserved = "ABCXYZabcxyz0189-._~"
    assert url_encode(unreserved) == unreserved


def test_reserved_characters_are_all_escaped():
    encoded = url_encode("a/b?c=d&e")
    assert "/" not in encoded
    assert "?" not in encoded
    assert "&" not in encoded
    assert "=" not in encoded


@pytest.mark.parametrize(
    "text",
    ["31d4d  %$  96e407aad42", "en-US", "x=hello world!!~", "grüße", "a+b c/d", ""],
)
def test_round_trip(text):
    assert url_decode(url_encode(text)) == text


def test_decode_leaves_plus_alone():
    assert url_decode("a+b") == "a+b"


def test_decode_leaves_broken_escape_alone():
    assert url_decode("100%") == "100%"


def test_bytes_input_encoded():
    assert url_encode("ü".encode()) == url_encode("ü")