from .new import New
from .usecase import PrecompressionUseCase
from .relay import Relay

__all__ = ["New", "PrecompressionUseCase", "Relay"]
