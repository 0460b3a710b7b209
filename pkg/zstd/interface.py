"""Interface for Zstd dictionary compression operations."""

from typing import Protocol, runtime_checkable

from .type import CompressionDictionary


@runtime_checkable
class IZstd(Protocol):
    """Protocol for dictionary compression operations."""

    @property
    def dictionary(self) -> CompressionDictionary:
        """Dictionary context used by this compressor."""
        ...

    def compress(self, data: bytes) -> bytes:
        """Compress bytes data in memory."""
        ...

    def decompress(self, data: bytes) -> bytes:
        """Decompress bytes data in memory."""
        ...

    def compress_text(self, text: str) -> bytes:
        """Compress a UTF-8 string."""
        ...

    def decompress_text(self, data: bytes) -> str:
        """Decompress to a UTF-8 string."""
        ...


__all__ = ["IZstd"]
