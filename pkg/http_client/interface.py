from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from .type import HTTPResponse


@runtime_checkable
class IHTTPClient(Protocol):
    """Protocol defining the outbound HTTP client interface."""

    async def post_json(
        self,
        url: str,
        body: Any,
        params: Optional[Mapping[str, str]] = None,
    ) -> HTTPResponse:
        """POST a JSON body and return the fully read response."""
        ...

    async def close(self) -> None:
        """Release pooled connections."""
        ...


__all__ = ["IHTTPClient"]
