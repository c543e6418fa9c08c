"""
Tests for the proxy request validation helpers.

URL checks are a case-sensitive prefix test; method checks accept any case.
"""

import pytest

from hc.exceptions import ValidationError
from hc.schemas.proxy import ProxyRequest
from hc.services.validation import (
    HTTP_METHODS,
    validate_method,
    validate_proxy_request,
    validate_url,
)


class TestValidateURL:

    @pytest.mark.parametrize("url", [
        "http://example.com",
        "https://example.com",
        "https://example.com/api/v1/users",
        "https://example.com/search?q=test&page=1",
        "https://x",
    ])
    def test_valid_urls(self, url):
        validate_url(url)

    def test_empty_url(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_url("")

        assert exc_info.value.messages == ["URL is required"]

    @pytest.mark.parametrize("url", [
        "not-a-url",
        "example.com",
        "ftp://x",
        "file:///etc/passwd",
        "HTTP://example.com",
        " https://example.com",
    ])
    def test_urls_without_http_prefix(self, url):
        with pytest.raises(ValidationError) as exc_info:
            validate_url(url)

        assert exc_info.value.messages == ["URL must start with http:// or https://"]


class TestValidateMethod:

    @pytest.mark.parametrize("method", HTTP_METHODS)
    def test_supported_methods(self, method):
        validate_method(method)

    @pytest.mark.parametrize("method", ["get", "Post", "options"])
    def test_methods_are_case_insensitive(self, method):
        validate_method(method)

    @pytest.mark.parametrize("method,expected", [
        ("TRACE", "invalid HTTP method: TRACE"),
        ("connect", "invalid HTTP method: CONNECT"),
        ("", "invalid HTTP method: "),
    ])
    def test_unsupported_methods(self, method, expected):
        with pytest.raises(ValidationError) as exc_info:
            validate_method(method)

        assert exc_info.value.messages == [expected]


class TestValidateProxyRequest:

    def test_valid_request(self):
        validate_proxy_request(ProxyRequest(method="get", url="https://example.com"))

    def test_collects_every_failure(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_proxy_request(ProxyRequest(method="FETCH", url="ftp://example.com"))

        assert exc_info.value.messages == [
            "URL must start with http:// or https://",
            "invalid HTTP method: FETCH",
        ]
