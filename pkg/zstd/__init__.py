from .type import ZstdConfig, CompressionDictionary, DictionaryLoadError
from .interface import IZstd
from .zstd import Zstd, load_dictionary, load_dictionary_file

__all__ = [
    "ZstdConfig",
    "CompressionDictionary",
    "DictionaryLoadError",
    "IZstd",
    "Zstd",
    "load_dictionary",
    "load_dictionary_file",
]
