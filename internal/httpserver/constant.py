from typing import Final

APP_TITLE: Final[str] = "HTML Pre-compressor"
APP_DESCRIPTION: Final[str] = "Compresses HTML with a shared zstd dictionary and forwards it to HTML storage"

ROUTE_ROOT: Final[str] = "/"
ROUTE_METRICS: Final[str] = "/metrics"

REQUEST_ID_HEADER: Final[str] = "X-Request-ID"

STATUS_OK: Final[str] = "ok"
ERROR_INTERNAL: Final[str] = "Internal server error"
