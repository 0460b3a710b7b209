"""Tests for the configuration loader."""

import pytest

from config.config import ConfigLoader, Config, load_config, validate_config

ENV_KEYS = [
    "PRECOMPRESSOR_SERVER_PORT",
    "PRECOMPRESSOR_DOWNSTREAM_ENDPOINT",
    "PRECOMPRESSOR_DOWNSTREAM_TIMEOUT_SECONDS",
    "PRECOMPRESSOR_LOGGING_COLORIZE",
    "PRECOMPRESSOR_COMPRESSION_LEVEL",
    "PRECOMPRESSOR_LOGGING_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate from the host environment; values loaded from .env are undone too."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


class TestConfigLoader:
    def test_defaults(self, tmp_path):
        config = load_config([str(tmp_path)])

        assert config.server.port == 8080
        assert config.downstream.endpoint == "http://html-storage.default.svc.cluster.local"
        assert config.downstream.timeout_seconds == 120.0
        assert config.compression.dictionary_path == "./zstd_dict"
        assert config.compression.level == 9
        assert config.logging.level == "INFO"

    def test_yaml_overrides_defaults(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "server:\n"
            "  port: 9000\n"
            "downstream:\n"
            "  endpoint: http://storage.local\n"
            "compression:\n"
            "  dictionary_path: /data/dict\n"
        )

        config = load_config([str(tmp_path)])

        assert config.server.port == 9000
        assert config.downstream.endpoint == "http://storage.local"
        assert config.compression.dictionary_path == "/data/dict"
        assert config.server.host == "0.0.0.0"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "config.yaml").write_text("server:\n  port: 9000\n")
        monkeypatch.setenv("PRECOMPRESSOR_SERVER_PORT", "9100")
        monkeypatch.setenv("PRECOMPRESSOR_LOGGING_COLORIZE", "false")

        config = load_config([str(tmp_path)])

        assert config.server.port == 9100
        assert config.logging.colorize is False

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("PRECOMPRESSOR_DOWNSTREAM_ENDPOINT=http://from-dotenv\n")

        config = ConfigLoader([str(tmp_path)]).read_config()

        assert config.downstream.endpoint == "http://from-dotenv"

    def test_unparseable_env_number_falls_back(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PRECOMPRESSOR_DOWNSTREAM_TIMEOUT_SECONDS", "soon")

        config = load_config([str(tmp_path)])

        assert config.downstream.timeout_seconds == 120.0

    def test_invalid_logging_level_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PRECOMPRESSOR_LOGGING_LEVEL", "verbose")

        with pytest.raises(ValueError, match="logging.level"):
            load_config([str(tmp_path)])

    def test_invalid_port_rejected(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PRECOMPRESSOR_SERVER_PORT", "70000")

        with pytest.raises(ValueError, match="server.port"):
            load_config([str(tmp_path)])


class TestValidateConfig:
    def test_valid_default(self):
        validate_config(Config())

    def test_collects_every_problem(self):
        config = Config()
        config.downstream.endpoint = ""
        config.downstream.timeout_seconds = 0
        config.server.shutdown_drain_seconds = -1

        with pytest.raises(ValueError) as exc_info:
            validate_config(config)

        message = str(exc_info.value)
        assert "downstream.endpoint" in message
        assert "downstream.timeout_seconds" in message
        assert "server.shutdown_drain_seconds" in message

    def test_invalid_logging_level_rejected(self):
        config = Config()
        config.logging.level = "verbose"

        with pytest.raises(ValueError, match="logging.level"):
            validate_config(config)

    def test_logging_level_alias_accepted(self):
        config = Config()
        config.logging.level = "warn"

        validate_config(config)

    def test_compression_level_out_of_range(self):
        config = Config()
        config.compression.level = 23

        with pytest.raises(ValueError, match="compression.level"):
            validate_config(config)
