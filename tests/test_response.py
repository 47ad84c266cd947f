from cpr.errors import Error, ErrorCode
from cpr.response import CertInfo, Response
from cpr.types import Header, Url


def test_default_response_has_no_error():
    response = Response()
    assert response.error.code is ErrorCode.OK
    assert not response.error
    assert response.status_code == 0
    assert response.text == ""


def test_defaults_are_not_shared():
    first = Response()
    second = Response()
    first.header["hello"] = "world"
    first.cookies.encode = False
    assert "hello" not in second.header
    assert second.cookies.encode is True


def test_header_lookup_is_case_insensitive():
    response = Response(header=Header({"Content-Type": "text/html"}))
    assert response.header["content-type"] == "text/html"
    assert response.header["CONTENT-TYPE"] == "text/html"


def test_url_compares_with_string():
    response = Response(url=Url("http://localhost/hello.html"))
    assert response.url == "http://localhost/hello.html"


def test_error_in_response_is_truthy():
    response = Response(error=Error(ErrorCode.COULDNT_CONNECT, "refused"))
    assert response.error
    assert response.error.message == "refused"


def test_cert_info_is_a_list():
    info = CertInfo(["Subject:CN=localhost"])
    info.append("Issuer:CN=localhost")
    info.pop()
    assert info == ["Subject:CN=localhost"]
    response = Response(cert_infos=[info])
    assert response.cert_infos[0][0] == "Subject:CN=localhost"