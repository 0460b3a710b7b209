from dataclasses import dataclass, field
from typing import Optional

from .constant import NO_STATUS_CODE


@dataclass
class Config:
    """Configuration for the precompression pipeline.

    Attributes:
        endpoint: Base URL of the downstream HTML storage service
    """

    endpoint: str

    def __post_init__(self):
        if not self.endpoint or not self.endpoint.strip():
            raise ValueError("endpoint cannot be empty")
        self.endpoint = self.endpoint.strip().rstrip("/")


@dataclass
class Payload:
    """One HTML document to compress and forward."""

    identifier: str
    body: str = ""
    blog: str = ""
    timestamp: int = 0


@dataclass
class CompressedPayload:
    """A payload whose body has been replaced by dictionary-compressed bytes."""

    identifier: str
    compressed_body: bytes = field(repr=False)
    blog: str
    timestamp: int


@dataclass
class RelayOutcome:
    """Result of one downstream call.

    Attributes:
        succeeded: True only for an HTTP 200 response
        status_code: Response status, 0 when no response was received
        error: ErrConnection or ErrUpstream on failure
    """

    succeeded: bool
    status_code: int = NO_STATUS_CODE
    error: Optional[Exception] = None


__all__ = [
    "Config",
    "Payload",
    "CompressedPayload",
    "RelayOutcome",
]
