"""
FastAPI application setup.
Defines the app, middleware, exception handlers, and route registration.
"""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest  # type: ignore

from internal.precompression import Config as PrecompressionConfig, Relay
from internal.precompression import New as NewPrecompressionUseCase
from internal.precompression.delivery.http import New as NewPrecompressionHandler
from .constant import *
from .type import Dependencies


def create_app(deps: Dependencies) -> FastAPI:
    """Build the FastAPI application around initialized dependencies.

    The dictionary is already loaded when this runs, so the app never serves
    a request without it.

    Args:
        deps: Service dependencies

    Returns:
        FastAPI: Configured application instance
    """
    logger = deps.logger

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("========== API service started ==========")
        yield
        logger.info("========== Shutting down API service ==========")
        await shutdown(deps)
        logger.info("========== API service stopped ==========")

    app = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version=deps.config.service.version,
        lifespan=lifespan,
    )
    app.state.deps = deps

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Tag the request with an id and log request/response."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        with logger.trace_context(request_id=request_id):
            logger.info(
                f"Request: {request.method} {request.url.path} "
                f"from {request.client.host if request.client else 'unknown'}"
            )
            response = await call_next(request)
            duration = (time.perf_counter() - start_time) * 1000
            logger.info(f"Response: {response.status_code} ({duration:.1f}ms)")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Last-resort handler for anything the handlers did not map."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.exception(f"Unhandled exception in request {request_id}: {exc}")
        return JSONResponse(status_code=500, content={"error": ERROR_INTERNAL})

    @app.get(ROUTE_ROOT)
    async def root():
        return {"status": STATUS_OK}

    @app.get(ROUTE_METRICS)
    async def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    _register_precompression(app, deps)

    return app


def _register_precompression(app: FastAPI, deps: Dependencies) -> None:
    relay = Relay(client=deps.http_client, logger=deps.logger)
    usecase = NewPrecompressionUseCase(
        config=PrecompressionConfig(endpoint=deps.config.downstream.endpoint),
        compressor=deps.zstd,
        relay=relay,
        runner=deps.runner,
        logger=deps.logger,
    )
    handler = NewPrecompressionHandler(usecase=usecase, logger=deps.logger)
    app.include_router(handler.router())


async def shutdown(deps: Dependencies) -> None:
    """Release process-wide resources.

    In-flight background relays are cancelled, not drained; set
    ``server.shutdown_drain_seconds`` to wait for them first.
    """
    drain = deps.config.server.shutdown_drain_seconds or None
    await deps.runner.shutdown(drain_timeout=drain)
    await deps.http_client.close()


__all__ = ["create_app", "shutdown"]
