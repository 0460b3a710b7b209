import base64
from typing import Any, Dict
from urllib.parse import quote

import zstandard as zstd  # type: ignore

from pkg.zstd.interface import IZstd
from internal.precompression.constant import FIELD_BODY, FIELD_BLOG, FIELD_TIMESTAMP
from internal.precompression.errors import ErrCompressionFailed
from internal.precompression.metrics import file_compression_duration_seconds
from internal.precompression.type import Payload, CompressedPayload


def compress_payload(compressor: IZstd, payload: Payload) -> CompressedPayload:
    """Compress one payload body, observing the call duration."""
    try:
        with file_compression_duration_seconds.time():
            compressed = compressor.compress_text(payload.body)
    except zstd.ZstdError as e:
        raise ErrCompressionFailed(
            f"Failed to compress payload {payload.identifier}: {e}"
        ) from e

    return CompressedPayload(
        identifier=payload.identifier,
        compressed_body=compressed,
        blog=payload.blog,
        timestamp=payload.timestamp,
    )


def to_wire(compressed: CompressedPayload) -> Dict[str, Any]:
    """Downstream JSON representation: base64 body, blog and timestamp as-is."""
    return {
        FIELD_BODY: base64.b64encode(compressed.compressed_body).decode("ascii"),
        FIELD_BLOG: compressed.blog,
        FIELD_TIMESTAMP: compressed.timestamp,
    }


def build_url(endpoint: str, path: str) -> str:
    return f"{endpoint}/{quote(path, safe='')}"


__all__ = [
    "compress_payload",
    "to_wire",
    "build_url",
]
