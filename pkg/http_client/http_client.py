import asyncio
from typing import Any, Mapping, Optional

import httpx
from loguru import logger

from .constant import *
from .interface import IHTTPClient
from .type import HTTPClientConfig, HTTPClientError, HTTPResponse


class HTTPClient(IHTTPClient):
    """Shared async HTTP client backed by an httpx connection pool.

    One instance is created at startup and used concurrently by every
    request; httpx.AsyncClient is safe for that.
    """

    def __init__(
        self,
        config: HTTPClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize HTTP client.

        Args:
            config: HTTP client configuration
            transport: Optional custom transport (e.g. httpx.MockTransport)
        """
        self.config = config
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_seconds),
            limits=httpx.Limits(
                max_connections=config.max_connections,
                max_keepalive_connections=config.max_keepalive_connections,
            ),
            transport=transport,
        )

        logger.info(
            f"HTTP client initialized (timeout={config.timeout_seconds}s, "
            f"max_connections={config.max_connections})"
        )

    async def post_json(
        self,
        url: str,
        body: Any,
        params: Optional[Mapping[str, str]] = None,
    ) -> HTTPResponse:
        """POST a JSON body.

        The response body is always read in full so the connection goes
        back to the pool, whatever the status code.

        Args:
            url: Target URL
            body: JSON-serializable body
            params: Query parameters

        Returns:
            HTTPResponse with status code and body

        Raises:
            HTTPClientError: If the request cannot be sent or times out
        """
        if self._client.is_closed:
            raise HTTPClientError(ERROR_CLIENT_CLOSED)

        try:
            response = await asyncio.wait_for(
                self._client.post(
                    url,
                    json=body,
                    params=params,
                    headers={"Content-Type": CONTENT_TYPE_JSON},
                ),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise HTTPClientError(
                ERROR_DEADLINE_EXCEEDED.format(url=url, timeout=self.config.timeout_seconds)
            ) from e
        except httpx.HTTPError as e:
            raise HTTPClientError(ERROR_REQUEST_FAILED.format(url=url, error=e)) from e

        return HTTPResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    async def close(self) -> None:
        """Close the underlying connection pool."""
        if not self._client.is_closed:
            await self._client.aclose()
            logger.info("HTTP client closed")

    def is_closed(self) -> bool:
        return self._client.is_closed


__all__ = [
    "HTTPClient",
    "IHTTPClient",
    "HTTPClientConfig",
    "HTTPClientError",
    "HTTPResponse",
]
