import pytest

from saba.url import Url, UrlError


def test_url_host():
    url = "http://example.com"
    expected = Url(url=url, host="example.com", port="80", path="", searchpart="")
    assert Url(url).parse() == expected


def test_url_port():
    url = "http://example.com:8888"
    expected = Url(url=url, host="example.com", port="8888", path="", searchpart="")
    assert Url(url).parse() == expected


def test_url_port_path():
    url = "http://example.com:8888/index.html"
    expected = Url(
        url=url, host="example.com", port="8888", path="index.html", searchpart=""
    )
    assert Url(url).parse() == expected


def test_url_host_path():
    url = "http://example.com/index.html"
    expected = Url(
        url=url, host="example.com", port="80", path="index.html", searchpart=""
    )
    assert Url(url).parse() == expected


def test_url_host_port_path_searchquery():
    url = "http://example.com/index.html?a=123&b=456"
    expected = Url(
        url=url,
        host="example.com",
        port="80",
        path="index.html",
        searchpart="a=123&b=456",
    )
    assert Url(url).parse() == expected


def test_url_no_scheme():
    with pytest.raises(UrlError, match="Only HTTP scheme is supported."):
        Url("example.com").parse()


def test_unsupported_scheme():
    with pytest.raises(UrlError, match="Only HTTP scheme is supported."):
        Url("https://example.com:8888/index.html").parse()


def test_parse_updates_original():
    url = Url("http://example.com:8000/a/b?q=1")
    parsed = url.parse()
    assert url.host == "example.com"
    assert url.port == "8000"
    assert parsed.path == "a/b"
    assert parsed.searchpart == "q=1"


def test_is_http():
    assert Url("http://example.com").is_http() is True
    assert Url("https://example.com").is_http() is False