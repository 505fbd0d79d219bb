"""
Configuration for the todo server.

Related:
  - server.app.create_app: builds the application from a Config
  - server.run: overrides host/port/log level from the command line
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """HTTP server settings"""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class TodoConfig:
    """Todo list behaviour"""

    case_sensitive_search: bool = False


@dataclass
class Config:
    """Application settings"""

    server: ServerConfig = None  # type: ignore

    todo: TodoConfig = None  # type: ignore

    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        if self.server is None:
            self.server = ServerConfig()
        if self.todo is None:
            self.todo = TodoConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from a YAML file.

        Args:
            config_path: settings file (config/app_config.yaml when omitted)

        Returns:
            Config: loaded settings
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server") or {}
        todo_data = yaml_data.get("todo") or {}
        log_data = yaml_data.get("log") or {}

        return cls(
            server=ServerConfig(
                host=server_data.get("host", "127.0.0.1"),
                port=int(server_data.get("port", 8000)),
            ),
            todo=TodoConfig(
                case_sensitive_search=_as_bool(todo_data.get("case_sensitive_search", False)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file"),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Load settings from TODO_* environment variables."""
        return cls().apply_env()

    def apply_env(self) -> "Config":
        """Override settings with any TODO_* environment variables that are set.

        Returns:
            Config: this instance, for chaining
        """
        if (host := os.getenv("TODO_HOST")) is not None:
            self.server.host = host
        if (port := os.getenv("TODO_PORT")) is not None:
            self.server.port = int(port)
        if (case_sensitive := os.getenv("TODO_CASE_SENSITIVE_SEARCH")) is not None:
            self.todo.case_sensitive_search = _as_bool(case_sensitive)
        if (log_level := os.getenv("TODO_LOG_LEVEL")) is not None:
            self.log_level = log_level
        if (log_file := os.getenv("TODO_LOG_FILE")) is not None:
            self.log_file = log_file or None
        return self
