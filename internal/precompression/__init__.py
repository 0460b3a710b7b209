from .interface import IPrecompressionUseCase, IRelay
from .type import Config, Payload, CompressedPayload, RelayOutcome
from .errors import ErrInvalidInput, ErrCompressionFailed, ErrConnection, ErrUpstream
from .usecase import New, PrecompressionUseCase, Relay

__all__ = [
    "IPrecompressionUseCase",
    "IRelay",
    "Config",
    "Payload",
    "CompressedPayload",
    "RelayOutcome",
    "ErrInvalidInput",
    "ErrCompressionFailed",
    "ErrConnection",
    "ErrUpstream",
    "New",
    "PrecompressionUseCase",
    "Relay",
]
