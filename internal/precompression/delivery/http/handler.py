"""Precompression HTTP handler.

Convention: Delivery handler is THIN.
1. Read request body
2. Parse into DTOs and convert to domain payloads (presenters)
3. Call usecase
4. Map the outcome to an HTTP response
"""

from typing import Optional

from fastapi import APIRouter, Request, status  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from pkg.logger.logger import Logger
from internal.precompression.interface import IPrecompressionUseCase
from internal.precompression.errors import (
    ErrInvalidInput,
    ErrCompressionFailed,
    ErrConnection,
)
from internal.precompression.delivery.constant import *
from internal.precompression.delivery.type import StatusResponse, ErrorResponse
from .presenters import parse_single, parse_batch


class PrecompressionHandler:
    """Adapter between HTTP requests and the precompression usecase."""

    def __init__(
        self,
        usecase: IPrecompressionUseCase,
        logger: Optional[Logger] = None,
    ):
        self.usecase = usecase
        self.logger = logger

    def router(self) -> APIRouter:
        """Build the router. /batch is registered first so it wins over /{id}."""
        router = APIRouter(tags=["precompression"])
        router.add_api_route(
            ROUTE_BATCH,
            self.handle_batch,
            methods=["POST"],
            response_model=StatusResponse,
            responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        )
        router.add_api_route(
            ROUTE_SINGLE,
            self.handle_single,
            methods=["POST"],
            response_model=StatusResponse,
            responses={400: {"model": ErrorResponse}},
        )
        return router

    async def handle_single(self, id: str, request: Request) -> JSONResponse:
        """Acknowledge at once; compression and relay run in the background."""
        raw = await request.body()

        try:
            payload = parse_single(raw, id)
        except ErrInvalidInput as e:
            if self.logger:
                self.logger.warning(f"Invalid JSON for {id}: {e}")
            return _error(status.HTTP_400_BAD_REQUEST, ERROR_INVALID_JSON)

        self.usecase.submit(payload)

        return _success()

    async def handle_batch(self, request: Request) -> JSONResponse:
        """Compress every item and relay them in one downstream call."""
        raw = await request.body()

        try:
            items = parse_batch(raw)
        except ErrInvalidInput as e:
            if self.logger:
                self.logger.warning(f"Invalid JSON for batch: {e}")
            return _error(status.HTTP_400_BAD_REQUEST, ERROR_INVALID_JSON)

        try:
            outcome = await self.usecase.process_batch(items)
        except ErrCompressionFailed as e:
            if self.logger:
                self.logger.error(f"Batch compression failed: {e}")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_COMPRESSION)

        if outcome.succeeded:
            return _success()

        if isinstance(outcome.error, ErrConnection):
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_RELAY_CONNECTION)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERROR_RELAY_UPSTREAM)


def _success() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content={"status": STATUS_SUCCESS})


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


__all__ = ["PrecompressionHandler"]
