from dataclasses import dataclass

from pkg.logger.logger import Logger
from pkg.zstd.zstd import Zstd
from pkg.http_client.http_client import HTTPClient
from pkg.task_runner.task_runner import TaskRunner
from config.config import Config


@dataclass
class Dependencies:
    """Dependencies container for the API service.

    Attributes:
        logger: Logger instance for structured logging
        zstd: Dictionary compressor (dictionary already loaded)
        http_client: Shared downstream HTTP client
        runner: Runner for detached single-item work
        config: Application configuration
    """

    logger: Logger
    zstd: Zstd
    http_client: HTTPClient
    runner: TaskRunner
    config: Config


__all__ = ["Dependencies"]
