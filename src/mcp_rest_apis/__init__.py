"""MCP REST APIs - HTTP requests and a small file store exposed as MCP tools."""

__version__ = "1.0.0"

from .audit import AuditLog
from .config import ServerConfig
from .exceptions import (
    ToolError,
    ValidationError,
    UnknownToolError,
    RequestError,
    NotFoundError,
    FileStoreError,
    ToolExecutionError,
    StartupError,
    ConfigurationError,
    TransportError,
    InstallError,
    UnsupportedPlatformError,
)
from .http import HttpExecutor, HttpOutcome
from .logger import get_logger, setup_logging
from .storage import FileStore
from .tools import ToolCallResult, ToolDefinition, ToolDispatcher, ToolRegistry, build_registry

__all__ = [
    "__version__",
    "AuditLog",
    "ServerConfig",
    "ToolError",
    "ValidationError",
    "UnknownToolError",
    "RequestError",
    "NotFoundError",
    "FileStoreError",
    "ToolExecutionError",
    "StartupError",
    "ConfigurationError",
    "TransportError",
    "InstallError",
    "UnsupportedPlatformError",
    "HttpExecutor",
    "HttpOutcome",
    "get_logger",
    "setup_logging",
    "FileStore",
    "ToolCallResult",
    "ToolDefinition",
    "ToolDispatcher",
    "ToolRegistry",
    "build_registry",
]
