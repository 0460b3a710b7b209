import sys
from typing import Optional, Iterator, Protocol, runtime_checkable
from contextvars import ContextVar
from contextlib import contextmanager
from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Copied into every task spawned while set, so background relays log under
# the id of the request that scheduled them.
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


def current_id() -> Optional[str]:
    """Trace id if one is set, else the request id."""
    return _trace_id_var.get() or _request_id_var.get()


def _inject_id(record) -> bool:
    record["extra"][TRACE_ID_KEY] = current_id() or ""
    return True


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ) -> Iterator[None]: ...

    def get_request_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def critical(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Logger wrapper with request id support.

    Owns the process-wide loguru sink: constructing a Logger replaces every
    handler, so loguru calls made elsewhere (task runner, HTTP client) land in
    the same stdout stream with the same format.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))

        with logger.trace_context(request_id=request_id):
            logger.info("Relaying payload")
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(service=config.service_name)

        _loguru_logger.remove()
        if self.config.enable_console:
            _loguru_logger.add(
                sys.stdout,
                colorize=self.config.colorize,
                format=self._format(),
                level=self.config.level.value,
                filter=_inject_id,
            )

    def _format(self) -> str:
        parts = [LOG_FORMAT_TIME, LOG_FORMAT_LEVEL]
        if self.config.enable_trace_id:
            parts.append(LOG_FORMAT_TRACE)
        return " | ".join(parts) + f" | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"

    @contextmanager
    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ):
        """Set trace and/or request id for the enclosed block, then restore."""
        trace_token = _trace_id_var.set(trace_id) if trace_id else None
        request_token = _request_id_var.set(request_id) if request_id else None

        try:
            yield
        finally:
            if trace_token is not None:
                _trace_id_var.reset(trace_token)
            if request_token is not None:
                _request_id_var.reset(request_token)

    def get_request_id(self) -> Optional[str]:
        return _request_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).critical(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log at error level with the active exception's traceback."""
        self._loguru.opt(depth=1, exception=True).error(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
    "current_id",
]
