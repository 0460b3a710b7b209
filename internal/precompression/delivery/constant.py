"""Constants for precompression delivery layer."""

# Routes
ROUTE_BATCH = "/batch"
ROUTE_SINGLE = "/{id}"

# Response bodies
STATUS_SUCCESS = "success"
ERROR_INVALID_JSON = "Invalid JSON"
ERROR_RELAY_CONNECTION = "Failed to send to original endpoint"
ERROR_RELAY_UPSTREAM = "Original endpoint returned non-OK status"
ERROR_COMPRESSION = "Failed to compress payload"
