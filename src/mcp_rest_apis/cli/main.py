"""
mcprestapis command line.

    mcprestapis serve     run the MCP server on stdio
    mcprestapis install   register the server with Claude Desktop
"""

import asyncio
import sys

import click
from dotenv import load_dotenv

from .. import __version__
from ..config import ServerConfig
from ..exceptions import StartupError
from ..logger import get_logger, setup_logging
from .installer import update_claude_desktop_config

logger = get_logger(__name__)


@click.group()
@click.version_option(__version__, prog_name="mcprestapis")
def cli() -> None:
    """Expose HTTP requests and a small file store as MCP tools."""


@cli.command()
def serve() -> None:
    """Run the server on stdin/stdout."""
    from ..server import serve as run_server

    load_dotenv()
    try:
        config = ServerConfig.from_env()
        setup_logging(level=config.log_level)
        asyncio.run(run_server(config))
    except StartupError as e:
        setup_logging()
        logger.error("Error creating server: %s", e)
        sys.exit(1)


@cli.command()
def install() -> None:
    """Add this server to the Claude Desktop configuration."""
    setup_logging()
    try:
        path = update_claude_desktop_config()
    except StartupError as e:
        logger.error("%s", e)
        sys.exit(1)
    click.echo(f"Updated config at: {path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
