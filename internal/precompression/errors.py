"""Module-specific errors for precompression domain."""


class ErrInvalidInput(Exception):
    """Raised when a request body cannot be parsed into payloads."""

    pass


class ErrCompressionFailed(Exception):
    """Raised when an HTML body cannot be compressed."""

    pass


class ErrConnection(Exception):
    """Raised when the downstream request could not be sent or timed out."""

    pass


class ErrUpstream(Exception):
    """Raised when the downstream service answered with a non-success status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"Original endpoint returned non-OK status: {status_code}")


__all__ = [
    "ErrInvalidInput",
    "ErrCompressionFailed",
    "ErrConnection",
    "ErrUpstream",
]
