# Native zstd levels
MIN_LEVEL = 1
MAX_LEVEL = 22
DEFAULT_LEVEL = 9

DEFAULT_ENCODING = "utf-8"

# Upper bound for a single decompressed frame (256 MiB)
DEFAULT_MAX_OUTPUT_SIZE = 256 * 1024 * 1024

# Errors
ERROR_INVALID_LEVEL = "Invalid compression level: {level}. Must be {min}-{max}."
ERROR_DICTIONARY_EMPTY = "Zstd dictionary is empty"
ERROR_DICTIONARY_READ_FAILED = "Failed to read Zstd dictionary {path}: {error}"
ERROR_DICTIONARY_BUILD_FAILED = "Failed to create Zstd dictionary: {error}"
ERROR_COMPRESSION_FAILED = "Zstd compression failed: {error}"
ERROR_DECOMPRESSION_FAILED = "Zstd decompression failed: {error}"
