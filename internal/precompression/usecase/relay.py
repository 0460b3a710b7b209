from typing import Any, Optional

from pkg.logger.logger import Logger
from pkg.http_client.interface import IHTTPClient
from pkg.http_client.type import HTTPClientError
from internal.precompression.interface import IRelay
from internal.precompression.constant import (
    QUERY_PARAM_PRECOMPRESSED,
    SUCCESS_STATUS_CODE,
    NO_STATUS_CODE,
)
from internal.precompression.errors import ErrConnection, ErrUpstream
from internal.precompression.type import RelayOutcome


class Relay(IRelay):
    """Issues compressed payloads to the downstream storage service.

    Failures are returned as a failed RelayOutcome, never raised, and are
    left to the caller to log. No retries.
    """

    def __init__(self, client: IHTTPClient, logger: Optional[Logger] = None):
        self.client = client
        self.logger = logger

    async def relay(self, url: str, body: Any, precompressed: bool = True) -> RelayOutcome:
        params = {QUERY_PARAM_PRECOMPRESSED: "true"} if precompressed else None

        try:
            response = await self.client.post_json(url, body, params=params)
        except HTTPClientError as e:
            return RelayOutcome(
                succeeded=False,
                status_code=NO_STATUS_CODE,
                error=ErrConnection(str(e)),
            )

        if self.logger:
            self.logger.debug(f"POST {url} answered {response.status_code}")

        if response.status_code != SUCCESS_STATUS_CODE:
            return RelayOutcome(
                succeeded=False,
                status_code=response.status_code,
                error=ErrUpstream(response.status_code),
            )

        return RelayOutcome(succeeded=True, status_code=response.status_code)


__all__ = ["Relay"]
