"""MCP stdio transport: list-tools and call-tool over stdin/stdout."""

from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .. import __version__
from ..audit import AuditLog
from ..config import ServerConfig
from ..exceptions import TransportError
from ..http import HttpExecutor
from ..logger import get_logger
from ..storage import FileStore
from ..tools import ToolDispatcher, build_registry

logger = get_logger(__name__)

SERVER_NAME = "requests"


class ToolCallFailed(Exception):
    """Carries an error result through the SDK, which reports it with ``isError`` set."""

    pass


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create the MCP server for the tools of ``dispatcher``.

    Args:
        dispatcher: Dispatcher holding the tool registry.

    Returns:
        The configured low-level MCP server.
    """
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.parameters)
            for tool in dispatcher.registry.descriptors()
        ]

    # Arguments are validated by the dispatcher so the error names every offending field.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        result = await dispatcher.call(name, arguments)
        if result.is_error:
            raise ToolCallFailed(result.text)
        return [types.TextContent(type="text", text=result.text)]

    return server


def build_dispatcher(config: ServerConfig) -> ToolDispatcher:
    """Wire executor, file store and audit log into a dispatcher."""
    audit = AuditLog(config.log_file)
    executor = HttpExecutor(timeout=config.http_timeout, audit=audit)
    store = FileStore(config.files_dir)
    return ToolDispatcher(build_registry(executor, store), tool_timeout=config.tool_timeout)


async def serve(config: ServerConfig) -> None:
    """Serve tool calls on stdin/stdout until the client disconnects.

    Args:
        config: Server configuration.

    Raises:
        TransportError: If the stdio transport cannot be set up or fails.
    """
    server = create_server(build_dispatcher(config))
    logger.info("Files directory: %s, audit log: %s", config.files_dir, config.log_file)

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("MCP Rest APIs Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    except Exception as e:
        msg = f"Error running stdio server: {e}"
        logger.error(msg, exc_info=True)
        raise TransportError(msg) from e

    logger.info("Client disconnected, shutting down.")
