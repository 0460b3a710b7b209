from .new import New
from .handler import PrecompressionHandler

__all__ = ["New", "PrecompressionHandler"]
