from typing import Final

# Downstream protocol
QUERY_PARAM_PRECOMPRESSED: Final[str] = "is_precompressed"
BATCH_PATH: Final[str] = "batch"
SUCCESS_STATUS_CODE: Final[int] = 200

# Wire fields
FIELD_BODY: Final[str] = "body"
FIELD_BLOG: Final[str] = "blog"
FIELD_TIMESTAMP: Final[str] = "timestamp"

# Relay modes (metric label values)
MODE_SINGLE: Final[str] = "single"
MODE_BATCH: Final[str] = "batch"

# Relay results (metric label values)
RESULT_SUCCESS: Final[str] = "success"
RESULT_CONNECTION_ERROR: Final[str] = "connection_error"
RESULT_UPSTREAM_ERROR: Final[str] = "upstream_error"

# Status code recorded when no response was received
NO_STATUS_CODE: Final[int] = 0
