from typing import Final

# Logger configuration
LOGGER_ENABLE_CONSOLE: Final[bool] = True
LOGGER_ENABLE_TRACE_ID: Final[bool] = True

# Background dispatch
TASK_RUNNER_NAME: Final[str] = "relay"

# Process exit codes
EXIT_CONFIG_ERROR: Final[int] = 2
EXIT_DICTIONARY_ERROR: Final[int] = 3
