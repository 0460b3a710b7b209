"""Factory function for creating the precompression HTTP handler."""

from typing import Optional

from pkg.logger.logger import Logger
from internal.precompression.interface import IPrecompressionUseCase
from .handler import PrecompressionHandler


def New(
    usecase: IPrecompressionUseCase,
    logger: Optional[Logger] = None,
) -> PrecompressionHandler:
    """Create a new precompression handler instance.

    Raises:
        ValueError: If usecase is None
    """
    if usecase is None:
        raise ValueError("usecase cannot be None")

    return PrecompressionHandler(usecase=usecase, logger=logger)


__all__ = ["New"]
