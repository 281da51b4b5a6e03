"""Export the error taxonomy used by tool calls and by process startup."""

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

__all__ = [
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
]
