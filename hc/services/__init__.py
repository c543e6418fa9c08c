# Services package

from .proxy_executor import ProxyExecutor, REQUEST_TIMEOUT
from .store import PersistenceStore, deserialize_headers, serialize_headers
from .validation import validate_method, validate_proxy_request, validate_url

__all__ = [
    "ProxyExecutor",
    "REQUEST_TIMEOUT",
    "PersistenceStore",
    "deserialize_headers",
    "serialize_headers",
    "validate_method",
    "validate_proxy_request",
    "validate_url",
]
