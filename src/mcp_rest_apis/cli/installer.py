"""Registers the server in the Claude Desktop configuration file."""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..exceptions import InstallError, UnsupportedPlatformError
from ..logger import get_logger

logger = get_logger(__name__)

SERVER_KEY = "mcprestapis"
CONFIG_FILE_NAME = "claude_desktop_config.json"


def get_claude_desktop_config_path(
    platform: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Path:
    """Return the host configuration file path for ``platform``.

    Raises:
        UnsupportedPlatformError: On any platform other than macOS and Windows.
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "Claude" / CONFIG_FILE_NAME
    if platform == "win32":
        return Path(environ.get("APPDATA", "")) / "Claude" / CONFIG_FILE_NAME
    raise UnsupportedPlatformError(platform)


def server_entry(platform: Optional[str] = None) -> Dict[str, Any]:
    """The command the host runs to launch the server."""
    platform = platform or sys.platform
    if platform == "win32":
        return {"command": sys.executable, "args": ["-m", "mcp_rest_apis", "serve"]}
    return {"command": "mcprestapis", "args": ["serve"]}


def update_claude_desktop_config(
    platform: Optional[str] = None, config_path: Optional[Path] = None
) -> Path:
    """Add or replace the server entry in the host configuration file.

    Other keys of an existing, valid configuration are preserved. A missing or
    unreadable file is replaced by a new configuration.

    Args:
        platform: Platform identifier as in ``sys.platform``. Defaults to the running platform.
        config_path: Override for the configuration file location.

    Returns:
        The path of the written configuration file.

    Raises:
        UnsupportedPlatformError: If the platform has no known configuration path.
        InstallError: If the configuration file cannot be written.
    """
    platform = platform or sys.platform
    path = config_path or get_claude_desktop_config_path(platform)

    config: Dict[str, Any] = {}
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(loaded, dict):
            config = loaded
        else:
            logger.warning("Config at %s is not a JSON object, creating new config file", path)
    except (OSError, json.JSONDecodeError):
        logger.info("Creating new config file at %s", path)

    servers = config.get("mcpServers")
    if not isinstance(servers, dict):
        servers = {}
    entry = server_entry(platform)
    servers[SERVER_KEY] = entry
    config["mcpServers"] = servers

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except OSError as e:
        msg = f"Error updating config at {path}: {e}"
        logger.error(msg)
        raise InstallError(msg) from e

    logger.info("Updated config at: %s", path)
    logger.info("Added server with command: %s %s", entry["command"], " ".join(entry["args"]))
    return path
