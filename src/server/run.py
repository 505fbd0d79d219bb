"""CLI entry point for launching the FastAPI app with uvicorn."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import uvicorn

from src.todo_manager.config import DEFAULT_CONFIG_PATH, Config
from src.todo_manager.logger import setup_logger

from .app import create_app

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the todo web server")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML settings file; TODO_* environment variables override it, options override both",
    )
    parser.add_argument("--host", default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Bind port")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Read settings from YAML (when present), then environment, then command line."""
    config_path = args.config or DEFAULT_CONFIG_PATH
    config = Config.from_yaml(config_path) if config_path.exists() else Config()
    config.apply_env()
    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port
    if args.log_level:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> None:
    """Run the development server."""
    args = build_parser().parse_args(argv)
    config = load_config(args)
    setup_logger(log_level=config.log_level, log_file=config.log_file)

    logger.info("Starting todo server on %s:%s", config.server.host, config.server.port)
    uvicorn.run(
        create_app(config=config),
        host=config.server.host,
        port=config.server.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
