from .http_client import HTTPClient
from .interface import IHTTPClient
from .type import HTTPClientConfig, HTTPClientError, HTTPResponse

__all__ = [
    "HTTPClient",
    "IHTTPClient",
    "HTTPClientConfig",
    "HTTPClientError",
    "HTTPResponse",
]
