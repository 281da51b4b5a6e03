"""
Exception classes for the MCP REST APIs server.

Two unrelated hierarchies are defined here. ``ToolError`` covers failures of a
single tool call; the dispatcher turns them into error results and the server
keeps running. ``StartupError`` covers failures that end the process (transport
setup, configuration, installation).
"""

from typing import Optional


class ToolError(Exception):
    """Base exception for all recoverable, per-call tool errors."""

    pass


class ValidationError(ToolError):
    """Raised when tool arguments are missing or have the wrong type."""

    pass


class UnknownToolError(ToolError):
    """Raised when a tool call names a tool that is not registered."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class RequestError(ToolError):
    """Raised when an outbound HTTP call fails or returns a non-success status."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message)


class NotFoundError(ToolError):
    """Raised when a requested file does not exist in the file store."""

    pass


class FileStoreError(ToolError):
    """Raised when the file store cannot read, write or list its directory."""

    pass


class ToolExecutionError(ToolError):
    """Raised when a tool handler fails in a way not covered above, e.g. a timeout."""

    pass


class StartupError(Exception):
    """Base exception for fatal errors that terminate the process."""

    pass


class ConfigurationError(StartupError):
    """Raised when the server configuration cannot be loaded."""

    pass


class TransportError(StartupError):
    """Raised when the stdio transport cannot be set up or fails while running."""

    pass


class InstallError(StartupError):
    """Raised when the host configuration file cannot be written."""

    pass


class UnsupportedPlatformError(InstallError):
    """Raised when the installer runs on a platform without a known host config path."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Unsupported platform: {platform}")
