from pathlib import Path
from typing import Union

import zstandard as zstd  # type: ignore

from .constant import *
from .interface import IZstd
from .type import ZstdConfig, CompressionDictionary, DictionaryLoadError


def load_dictionary(data: bytes, level: int = DEFAULT_LEVEL) -> CompressionDictionary:
    """Build a compression dictionary context from a raw blob.

    Accepts both trained zstd dictionaries and raw-content dictionaries.

    Args:
        data: Dictionary bytes
        level: Native zstd level to precompute the compression tables for

    Returns:
        Immutable CompressionDictionary

    Raises:
        DictionaryLoadError: If data is empty, malformed, or level is invalid
    """
    if not data:
        raise DictionaryLoadError(ERROR_DICTIONARY_EMPTY)

    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise DictionaryLoadError(
            ERROR_INVALID_LEVEL.format(level=level, min=MIN_LEVEL, max=MAX_LEVEL)
        )

    try:
        zstd_dict = zstd.ZstdCompressionDict(bytes(data), dict_type=zstd.DICT_TYPE_AUTO)
        zstd_dict.precompute_compress(level=level)
    except zstd.ZstdError as e:
        raise DictionaryLoadError(ERROR_DICTIONARY_BUILD_FAILED.format(error=e)) from e

    return CompressionDictionary(
        zstd_dict=zstd_dict,
        level=level,
        dict_id=zstd_dict.dict_id(),
        size=len(data),
    )


def load_dictionary_file(
    path: Union[str, Path], level: int = DEFAULT_LEVEL
) -> CompressionDictionary:
    """Read a dictionary blob from disk and build its context.

    Raises:
        DictionaryLoadError: If the file cannot be read or the blob is invalid
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise DictionaryLoadError(
            ERROR_DICTIONARY_READ_FAILED.format(path=path, error=e)
        ) from e

    return load_dictionary(data, level)


class Zstd(IZstd):
    """
    Zstandard dictionary compression implementation.

    The dictionary is shared read-only. A fresh ZstdCompressor is created per
    call because compressor objects are not safe to share across threads;
    with precomputed tables this is cheap.
    """

    def __init__(self, config: ZstdConfig, dictionary: CompressionDictionary):
        """Initialize Zstd compressor.

        Args:
            config: ZstdConfig configuration
            dictionary: Loaded dictionary context
        """
        self.config = config
        self._dictionary = dictionary

    @property
    def dictionary(self) -> CompressionDictionary:
        return self._dictionary

    def compress(self, data: bytes) -> bytes:
        """
        Compress bytes with the shared dictionary.

        Args:
            data: Raw bytes to compress

        Returns:
            A complete zstd frame (content size included)

        Raises:
            zstd.ZstdError: If compression fails
        """
        try:
            compressor = zstd.ZstdCompressor(
                level=self._dictionary.level,
                dict_data=self._dictionary.zstd_dict,
                write_content_size=True,
            )
            return compressor.compress(data)
        except zstd.ZstdError as e:
            raise zstd.ZstdError(ERROR_COMPRESSION_FAILED.format(error=e)) from e

    def decompress(self, data: bytes) -> bytes:
        """
        Decompress a frame produced with the same dictionary.

        Raises:
            zstd.ZstdError: If decompression fails
        """
        try:
            decompressor = zstd.ZstdDecompressor(dict_data=self._dictionary.zstd_dict)
            return decompressor.decompress(data, max_output_size=self.config.max_output_size)
        except zstd.ZstdError as e:
            raise zstd.ZstdError(ERROR_DECOMPRESSION_FAILED.format(error=e)) from e

    def compress_text(self, text: str) -> bytes:
        return self.compress(text.encode(DEFAULT_ENCODING))

    def decompress_text(self, data: bytes) -> str:
        return self.decompress(data).decode(DEFAULT_ENCODING)


__all__ = [
    "Zstd",
    "IZstd",
    "ZstdConfig",
    "CompressionDictionary",
    "DictionaryLoadError",
    "load_dictionary",
    "load_dictionary_file",
]
