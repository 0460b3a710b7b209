"""
HTML Pre-compressor API - Main entry point.
Loads config, loads the zstd dictionary, initializes dependencies and
starts the FastAPI service.
"""

import argparse
import sys
from typing import List, Optional

import uvicorn  # type: ignore

from pkg.logger.logger import Logger, LoggerConfig
from pkg.zstd.zstd import Zstd, load_dictionary_file
from pkg.zstd.type import ZstdConfig, DictionaryLoadError
from pkg.http_client.http_client import HTTPClient
from pkg.http_client.type import HTTPClientConfig
from pkg.task_runner.task_runner import TaskRunner
from config.config import load_config, validate_config, Config
from internal.httpserver import Dependencies, create_app
from internal.precompression.metrics import background_tasks_in_flight
from internal.model.constant import (
    LOGGER_ENABLE_CONSOLE,
    LOGGER_ENABLE_TRACE_ID,
    TASK_RUNNER_NAME,
    EXIT_CONFIG_ERROR,
    EXIT_DICTIONARY_ERROR,
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="html-precompressor",
        description="A HTML pre-compressing server for Geulgyeol.",
    )
    parser.add_argument("-p", "--port", type=int, help="Port to run the server on")
    parser.add_argument(
        "-o",
        "--original-endpoint",
        dest="original_endpoint",
        help="Original HTML storage server endpoint",
    )
    parser.add_argument(
        "-z",
        "--zstd-dictionary",
        dest="zstd_dictionary",
        help="Path to Zstd dictionary file",
    )
    return parser.parse_args(argv)


def apply_args(config: Config, args: argparse.Namespace) -> Config:
    """Command line flags take precedence over every other config source."""
    if args.port is not None:
        config.server.port = args.port
    if args.original_endpoint:
        config.downstream.endpoint = args.original_endpoint
    if args.zstd_dictionary:
        config.compression.dictionary_path = args.zstd_dictionary
    validate_config(config)
    return config


def init_dependencies(config: Config) -> Dependencies:
    """Initialize all service dependencies.

    Args:
        config: Application configuration

    Returns:
        Dependencies struct with all initialized instances

    Raises:
        DictionaryLoadError: If the dictionary cannot be loaded
    """
    logger = Logger(
        LoggerConfig(
            level=config.logging.level,
            enable_console=LOGGER_ENABLE_CONSOLE,
            colorize=config.logging.colorize,
            service_name=config.service.name,
            enable_trace_id=LOGGER_ENABLE_TRACE_ID,
        )
    )
    logger.info("Logger initialized")

    # Load Zstd dictionary (fatal on failure)
    dictionary = load_dictionary_file(
        config.compression.dictionary_path, config.compression.level
    )
    data_compressor = Zstd(ZstdConfig(level=config.compression.level), dictionary)
    logger.info(
        f"Zstd dictionary loaded from {config.compression.dictionary_path} "
        f"({dictionary.size} bytes, id={dictionary.dict_id}, level={dictionary.level})"
    )

    http_client = HTTPClient(
        HTTPClientConfig(
            timeout_seconds=config.downstream.timeout_seconds,
            max_connections=config.downstream.max_connections,
        )
    )
    logger.info(f"Downstream endpoint: {config.downstream.endpoint}")

    runner = TaskRunner(name=TASK_RUNNER_NAME, on_change=background_tasks_in_flight.set)

    return Dependencies(
        logger=logger,
        zstd=data_compressor,
        http_client=http_client,
        runner=runner,
        config=config,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the pre-compressor API service."""
    args = parse_args(argv)

    try:
        config = apply_args(load_config(), args)
    except ValueError as e:
        print(e, file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        deps = init_dependencies(config)
    except DictionaryLoadError as e:
        print(f"Failed to start: {e}", file=sys.stderr)
        return EXIT_DICTIONARY_ERROR

    logger = deps.logger
    app = create_app(deps)

    logger.info(
        f"========== Starting {config.service.name} v{config.service.version} "
        f"on port {config.server.port} =========="
    )
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=logger.config.level.value.lower(),
        access_log=False,
    )
    return 0


def run():
    """Entry point for console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
