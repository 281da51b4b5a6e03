"""Server configuration read from environment variables (and an optional .env file)."""

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import ConfigurationError

APP_NAME = "mcp-rest-apis"

ENV_FILES_DIR = "MCP_REST_APIS_FILES_DIR"
ENV_LOG_FILE = "MCP_REST_APIS_LOG_FILE"
ENV_HTTP_TIMEOUT = "MCP_REST_APIS_HTTP_TIMEOUT"
ENV_TOOL_TIMEOUT = "MCP_REST_APIS_TOOL_TIMEOUT"
ENV_LOG_LEVEL = "MCP_REST_APIS_LOG_LEVEL"

DEFAULT_LOG_FILE = Path("logs") / "requests.log"
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_TOOL_TIMEOUT = 60.0


def user_data_dir(platform: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the per-user data directory for the current platform.

    Args:
        platform: Platform identifier as in ``sys.platform``. Defaults to the running platform.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        The base directory under which application data should live.
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    if platform == "win32":
        appdata = environ.get("APPDATA")
        return Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    xdg = environ.get("XDG_DATA_HOME")
    return Path(xdg) if xdg else Path.home() / ".local" / "share"


class ServerConfig(BaseModel):
    """Settings for one server process.

    Attributes:
        files_dir: Base directory of the file store.
        log_file: Audit log path, relative paths resolve against the working directory.
        http_timeout: Timeout in seconds for outbound HTTP calls.
        tool_timeout: Timeout in seconds for a single tool call.
        log_level: Level for the diagnostic logger.
    """

    model_config = ConfigDict(frozen=True)

    files_dir: Path
    log_file: Path = DEFAULT_LOG_FILE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    tool_timeout: float = DEFAULT_TOOL_TIMEOUT
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build the configuration from environment variables.

        Args:
            environ: Environment mapping. Defaults to ``os.environ``.

        Returns:
            The loaded configuration.

        Raises:
            ConfigurationError: If a numeric value or the log level is invalid.
        """
        environ = os.environ if environ is None else environ

        files_dir = environ.get(ENV_FILES_DIR)
        log_file = environ.get(ENV_LOG_FILE)

        return cls(
            files_dir=Path(files_dir).expanduser() if files_dir else user_data_dir(environ=environ) / APP_NAME / "apis",
            log_file=Path(log_file).expanduser() if log_file else DEFAULT_LOG_FILE,
            http_timeout=_parse_timeout(environ, ENV_HTTP_TIMEOUT, DEFAULT_HTTP_TIMEOUT),
            tool_timeout=_parse_timeout(environ, ENV_TOOL_TIMEOUT, DEFAULT_TOOL_TIMEOUT),
            log_level=_parse_level(environ.get(ENV_LOG_LEVEL, "INFO")),
        )


def _parse_timeout(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{key} must be a number of seconds, got '{raw}'.") from e
    if value <= 0:
        raise ConfigurationError(f"{key} must be greater than zero, got '{raw}'.")
    return value


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"{ENV_LOG_LEVEL} must be a logging level name, got '{raw}'.")
    return level
