from dataclasses import dataclass, field

import zstandard as zstd  # type: ignore

from .constant import *


class DictionaryLoadError(Exception):
    """Raised when a compression dictionary cannot be loaded or prepared."""

    pass


@dataclass
class ZstdConfig:
    """Zstd compressor configuration.

    Attributes:
        level: Native zstd level the dictionary context is prepared for
        max_output_size: Upper bound for a decompressed frame (bytes)
    """

    level: int = DEFAULT_LEVEL
    max_output_size: int = DEFAULT_MAX_OUTPUT_SIZE

    def __post_init__(self):
        """Validate configuration."""
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(
                ERROR_INVALID_LEVEL.format(level=self.level, min=MIN_LEVEL, max=MAX_LEVEL)
            )

        if self.max_output_size <= 0:
            raise ValueError("max_output_size must be positive")


@dataclass(frozen=True)
class CompressionDictionary:
    """Immutable dictionary context shared by every compression call.

    Built once by ``load_dictionary``; the underlying zstd dictionary has its
    compression tables precomputed for ``level``.
    """

    zstd_dict: zstd.ZstdCompressionDict = field(repr=False)
    level: int
    dict_id: int
    size: int


__all__ = [
    "DictionaryLoadError",
    "ZstdConfig",
    "CompressionDictionary",
]
