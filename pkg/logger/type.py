from dataclasses import dataclass
from typing import Union

from .constant import *


def parse_level(value: Union[str, LogLevel]) -> LogLevel:
    """Resolve a level name, case-insensitively and with aliases.

    Raises:
        ValueError: If the name is not a known level
    """
    if isinstance(value, LogLevel):
        return value

    name = str(value).strip().upper()
    name = LEVEL_ALIASES.get(name, name)
    try:
        return LogLevel(name)
    except ValueError:
        valid_levels = [l.value for l in LogLevel]
        raise ValueError(ERROR_INVALID_LEVEL.format(level=value, valid=valid_levels))


@dataclass
class LoggerConfig:
    """Logger configuration.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Enable console output
        colorize: Enable colored console output
        service_name: Service name bound to every record
        enable_trace_id: Render the request/trace id column
    """

    level: LogLevel = DEFAULT_LEVEL
    enable_console: bool = DEFAULT_ENABLE_CONSOLE
    colorize: bool = DEFAULT_COLORIZE
    service_name: str = DEFAULT_SERVICE_NAME
    enable_trace_id: bool = DEFAULT_ENABLE_TRACE_ID

    def __post_init__(self):
        """Validate configuration."""
        self.level = parse_level(self.level)


__all__ = ["LoggerConfig", "parse_level"]
