from typing import Dict, Optional

from pydantic import ValidationError  # type: ignore

from internal.precompression.errors import ErrInvalidInput
from internal.precompression.type import Payload
from internal.precompression.delivery.type import PayloadRequest, SingleRequest, BatchRequest


def parse_single(raw: bytes, identifier: str) -> Payload:
    """Parse a single-item request body.

    Raises:
        ErrInvalidInput: If the body is not a valid payload object
    """
    try:
        dto = SingleRequest.model_validate_json(raw)
    except ValidationError as e:
        raise ErrInvalidInput(str(e)) from e

    return to_payload(identifier, dto.root)


def parse_batch(raw: bytes) -> Dict[str, Payload]:
    """Parse a batch request body into identifier -> Payload.

    Raises:
        ErrInvalidInput: If the body is not an object of payload objects
    """
    try:
        dto = BatchRequest.model_validate_json(raw)
    except ValidationError as e:
        raise ErrInvalidInput(str(e)) from e

    items = dto.root or {}
    return {identifier: to_payload(identifier, item) for identifier, item in items.items()}


def to_payload(identifier: str, dto: Optional[PayloadRequest]) -> Payload:
    """Convert a DTO to a domain payload, nulls becoming zero values."""
    if dto is None:
        return Payload(identifier=identifier)

    return Payload(
        identifier=identifier,
        body=dto.body or "",
        blog=dto.blog or "",
        timestamp=dto.timestamp or 0,
    )


__all__ = [
    "parse_single",
    "parse_batch",
    "to_payload",
]
