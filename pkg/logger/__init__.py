from .logger import Logger, ILogger, current_id
from .type import LoggerConfig, parse_level

__all__ = ["Logger", "ILogger", "LoggerConfig", "current_id", "parse_level"]
