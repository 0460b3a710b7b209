"""Factory function for creating the precompression usecase."""

from typing import Optional

from pkg.logger.logger import Logger
from pkg.task_runner.task_runner import TaskRunner
from pkg.zstd.interface import IZstd
from internal.precompression.interface import IRelay
from internal.precompression.type import Config
from .usecase import PrecompressionUseCase


def New(
    config: Config,
    compressor: IZstd,
    relay: IRelay,
    runner: TaskRunner,
    logger: Optional[Logger] = None,
) -> PrecompressionUseCase:
    """Create a new PrecompressionUseCase instance.

    Args:
        config: Pipeline configuration (downstream endpoint)
        compressor: Dictionary compressor
        relay: Downstream relay
        runner: Runner for detached single-item work
        logger: Logger instance (optional)

    Returns:
        PrecompressionUseCase instance

    Raises:
        ValueError: If a dependency is missing or invalid
    """
    if not isinstance(config, Config):
        raise ValueError("config must be an instance of Config")

    if compressor is None:
        raise ValueError("compressor cannot be None")

    if relay is None:
        raise ValueError("relay cannot be None")

    if runner is None:
        raise ValueError("runner cannot be None")

    return PrecompressionUseCase(
        config=config,
        compressor=compressor,
        relay=relay,
        runner=runner,
        logger=logger,
    )


__all__ = ["New"]
