from dataclasses import dataclass, field
from typing import Dict

from .constant import *


class HTTPClientError(Exception):
    """Raised when a request could not be sent or no response arrived in time."""

    pass


@dataclass
class HTTPClientConfig:
    """HTTP client configuration.

    Attributes:
        timeout_seconds: Deadline for a whole request, from connect to the
            last body byte; each phase is also bounded by it
        max_connections: Connection pool size
        max_keepalive_connections: Idle connections kept in the pool
    """

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    max_keepalive_connections: int = DEFAULT_MAX_KEEPALIVE_CONNECTIONS

    def __post_init__(self):
        """Validate configuration."""
        if self.timeout_seconds <= 0:
            raise ValueError(ERROR_TIMEOUT_POSITIVE.format(value=self.timeout_seconds))

        if self.max_connections <= 0:
            raise ValueError(ERROR_MAX_CONNECTIONS_POSITIVE.format(value=self.max_connections))


@dataclass
class HTTPResponse:
    """A fully read response."""

    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)


__all__ = [
    "HTTPClientError",
    "HTTPClientConfig",
    "HTTPResponse",
]
