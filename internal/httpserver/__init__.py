"""HTTP server package for the pre-compressor.

This package contains:
- Dependencies: Struct holding all service dependencies
- create_app: FastAPI application factory
- shutdown: Process-wide shutdown hook
"""

from .type import Dependencies
from .server import create_app, shutdown

__all__ = [
    "Dependencies",
    "create_app",
    "shutdown",
]
