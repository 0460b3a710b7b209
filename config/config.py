import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field, fields
from typing import List, Dict, Any
from dotenv import load_dotenv

from pkg.logger.type import parse_level
from pkg.zstd.constant import MIN_LEVEL, MAX_LEVEL


@dataclass
class ServiceConfig:
    """Service identity."""

    name: str = "html-precompressor"
    version: str = "0.1.0"


@dataclass
class ServerConfig:
    """HTTP listener configuration.

    shutdown_drain_seconds: how long shutdown waits for in-flight background
    relays before cancelling them (0 = cancel immediately).
    """

    host: str = "0.0.0.0"
    port: int = 8080
    shutdown_drain_seconds: float = 0.0


@dataclass
class DownstreamConfig:
    """Downstream HTML storage service."""

    endpoint: str = "http://html-storage.default.svc.cluster.local"
    timeout_seconds: float = 120.0
    max_connections: int = 100


@dataclass
class CompressionConfig:
    """Dictionary compression configuration."""

    dictionary_path: str = "./zstd_dict"
    level: int = 9


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    colorize: bool = True


@dataclass
class Config:
    """Main configuration container.

    This is the root config object that contains all sub-configurations.
    """

    service: ServiceConfig = field(default_factory=ServiceConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    downstream: DownstreamConfig = field(default_factory=DownstreamConfig)
    compression: CompressionConfig = field(default_factory=CompressionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """Viper-style configuration loader.

    Loads configuration from:
    1. YAML files (lowest priority)
    2. .env files
    3. Environment variables (highest priority)

    Every field of every section is addressable as ``<section>.<field>``
    (env: ``PRECOMPRESSOR_<SECTION>_<FIELD>``); the dataclass default applies
    when no source sets it.
    """

    SECTIONS = {
        "service": ServiceConfig,
        "server": ServerConfig,
        "downstream": DownstreamConfig,
        "compression": CompressionConfig,
        "logging": LoggingConfig,
    }

    def __init__(self, config_paths: List[str] = None):
        self.config_name = "config"
        self.config_paths = config_paths or [".", "config", "/etc/precompressor"]
        self.env_prefix = "PRECOMPRESSOR"
        self._raw_config: Dict[str, Any] = {}

    def read_config(self) -> Config:
        """Read configuration from all sources.

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        self._load_yaml()
        self._load_env_files()
        config = Config(
            **{name: self._build_section(name, cls) for name, cls in self.SECTIONS.items()}
        )
        validate_config(config)
        return config

    def _load_yaml(self) -> None:
        """Load the first config.yaml / config.yml found on the search path."""
        for path in self.config_paths:
            for ext in ["yaml", "yml"]:
                file_path = Path(path) / f"{self.config_name}.{ext}"
                if file_path.is_file():
                    with open(file_path, "r", encoding="utf-8") as f:
                        self._raw_config = yaml.safe_load(f) or {}
                    return

    def _load_env_files(self) -> None:
        # Real environment variables keep precedence over .env files.
        for env_file in [".env", ".env.local"]:
            for path in self.config_paths:
                env_path = Path(path) / env_file
                if env_path.is_file():
                    load_dotenv(env_path, override=False)

    def _build_section(self, name: str, cls: type) -> Any:
        return cls(
            **{
                f.name: self._get_value(f"{name}.{f.name}", f.default)
                for f in fields(cls)
            }
        )

    def _env_key(self, key: str) -> str:
        """Map a dotted key to its env var, e.g. PRECOMPRESSOR_DOWNSTREAM_ENDPOINT."""
        return f"{self.env_prefix}_{key.replace('.', '_').upper()}"

    def _get_value(self, key: str, default: Any) -> Any:
        """Get value with priority: env > yaml > default."""
        env_value = os.getenv(self._env_key(key))
        if env_value is not None:
            return _coerce(env_value, default)

        value: Any = self._raw_config
        for k in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(k)

        return default if value is None else value


def _coerce(raw: str, default: Any) -> Any:
    """Convert an env string to the type of the field default.

    Unparseable numbers fall back to the default.
    """
    if isinstance(default, bool):
        return raw.strip().lower() in ("true", "1", "yes")
    if isinstance(default, (int, float)):
        try:
            return type(default)(raw)
        except ValueError:
            return default
    return raw


def validate_config(config: Config) -> None:
    """Validate configuration.

    Raises:
        ValueError: Listing every problem found
    """
    errors = []

    if not config.downstream.endpoint:
        errors.append("downstream.endpoint is required")

    if config.downstream.timeout_seconds <= 0:
        errors.append(
            f"downstream.timeout_seconds must be positive, got {config.downstream.timeout_seconds}"
        )

    if config.server.port <= 0 or config.server.port > 65535:
        errors.append(f"server.port must be between 1-65535, got {config.server.port}")

    if config.server.shutdown_drain_seconds < 0:
        errors.append(
            f"server.shutdown_drain_seconds must be non-negative, got {config.server.shutdown_drain_seconds}"
        )

    if not config.compression.dictionary_path:
        errors.append("compression.dictionary_path is required")

    if not MIN_LEVEL <= config.compression.level <= MAX_LEVEL:
        errors.append(
            f"compression.level must be between {MIN_LEVEL}-{MAX_LEVEL}, got {config.compression.level}"
        )

    try:
        parse_level(config.logging.level)
    except ValueError as e:
        errors.append(f"logging.level: {e}")

    if errors:
        raise ValueError(
            "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )


def load_config(config_paths: List[str] = None) -> Config:
    """Load configuration.

    Returns:
        Config object
    """
    return ConfigLoader(config_paths).read_config()
