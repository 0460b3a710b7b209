"""Delivery layer DTOs for precompression domain.

Convention: Delivery DTOs are DECOUPLED from domain types.
These models describe the HTTP wire format.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel  # type: ignore


class PayloadRequest(BaseModel):
    """One HTML document as posted by a client.

    Missing or null fields take zero values. Types are strict: a string
    timestamp, a float, a bool or a number body is rejected, not coerced.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    body: Optional[str] = Field(None, description="Raw HTML")
    blog: Optional[str] = Field(None, description="Blog reference, passed through")
    timestamp: Optional[int] = Field(None, description="Timestamp, passed through")


class SingleRequest(RootModel[Optional[PayloadRequest]]):
    """Body of POST /{id}; a literal null is an all-zero payload."""

    pass


class BatchRequest(RootModel[Optional[Dict[str, Optional[PayloadRequest]]]]):
    """Mapping of identifier to payload; null means an empty batch."""

    pass


class StatusResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str


__all__ = [
    "PayloadRequest",
    "SingleRequest",
    "BatchRequest",
    "StatusResponse",
    "ErrorResponse",
]
