"""
Validation helpers for proxy requests.

URL checks are a literal prefix test, not a full parse.
"""

from ..exceptions import ValidationError
from ..schemas.proxy import ProxyRequest

# HTTP methods accepted by the proxy endpoint
HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")

URL_SCHEMES: tuple[str, ...] = ("http://", "https://")


def validate_url(url: str) -> None:
    """Raise ValidationError unless ``url`` starts with http:// or https://."""
    if not url:
        raise ValidationError("URL is required")
    if not url.startswith(URL_SCHEMES):
        raise ValidationError("URL must start with http:// or https://")


def validate_method(method: str) -> None:
    """Raise ValidationError unless ``method`` is a supported verb (any case)."""
    method = method.upper()
    if method not in HTTP_METHODS:
        raise ValidationError(f"invalid HTTP method: {method}")


def validate_proxy_request(request: ProxyRequest) -> None:
    """
    Validate the URL and method of a proxy request together.

    Raises:
        ValidationError: carrying one message per failing field
    """
    messages: list[str] = []
    for check, value in ((validate_url, request.url), (validate_method, request.method)):
        try:
            check(value)
        except ValidationError as exc:
            messages.extend(exc.messages)

    if messages:
        raise ValidationError(messages)
