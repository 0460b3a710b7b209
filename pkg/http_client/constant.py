DEFAULT_TIMEOUT_SECONDS = 120.0
DEFAULT_MAX_CONNECTIONS = 100
DEFAULT_MAX_KEEPALIVE_CONNECTIONS = 20

CONTENT_TYPE_JSON = "application/json"

# Errors
ERROR_TIMEOUT_POSITIVE = "timeout_seconds must be positive, got {value}"
ERROR_MAX_CONNECTIONS_POSITIVE = "max_connections must be positive, got {value}"
ERROR_CLIENT_CLOSED = "HTTP client is closed"
ERROR_REQUEST_FAILED = "Request to {url} failed: {error}"
ERROR_DEADLINE_EXCEEDED = "Request to {url} did not complete within {timeout}s"
