from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Accepted spellings that loguru does not know
LEVEL_ALIASES = {"WARN": "WARNING"}

DEFAULT_SERVICE_NAME = "html-precompressor"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True
DEFAULT_ENABLE_TRACE_ID = True

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_TRACE = "<cyan>{extra[trace_id]: <36}</cyan>"
LOG_FORMAT_LOCATION = "<cyan>{file.path}</cyan>:<cyan>{line}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

TRACE_ID_KEY = "trace_id"
REQUEST_ID_KEY = "request_id"

ERROR_INVALID_LEVEL = "Invalid log level: {level}. Must be one of {valid}"
