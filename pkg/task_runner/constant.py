DEFAULT_NAME = "background"

ERROR_RUNNER_CLOSED = "Task runner '{name}' is shut down"
ERROR_DRAIN_TIMEOUT_NEGATIVE = "drain_timeout must be non-negative, got {value}"
