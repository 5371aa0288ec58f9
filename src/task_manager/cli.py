"""
Command-line interface for the task manager.

Provides ``task-manager serve`` to run the MCP server over streamable HTTP
or stdio, and ``task-manager operations`` to print the operation catalog.
"""

import json
import logging
import sys
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Config, load_config
from .context import ServerContext
from .errors import ConfigError
from .operations import list_operations

app = typer.Typer(
    name="task-manager",
    help="Task manager MCP server",
    no_args_is_help=True,
    add_completion=False,
)

logger = logging.getLogger(__name__)


class Transport(str, Enum):
    """Transport used to serve MCP clients."""

    STREAMABLE_HTTP = "streamable-http"
    STDIO = "stdio"


def configure_logging(level: str) -> None:
    """Configure root logging for the process."""
    # force=True replaces any handler installed by FastMCP on import.
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"task-manager {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = False,
) -> None:
    """Task manager MCP server."""


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address [default: 127.0.0.1]")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Bind port [default: 8001]")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    config_file: Annotated[
        Optional[str], typer.Option("--config", "-c", help="JSON or TOML config file")
    ] = None,
    transport: Annotated[
        Transport, typer.Option("--transport", "-t", help="MCP transport")
    ] = Transport.STREAMABLE_HTTP,
) -> None:
    """Run the task manager server."""
    try:
        config = load_config(config_file, host=host, port=port, log_level=log_level)
    except (ConfigError, ValueError) as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(1)

    configure_logging(config.log_level)
    logger.info(f"Starting task-manager {__version__} ({config.environment.value})")

    context = ServerContext(config=config)

    if transport == Transport.STDIO:
        _serve_stdio(context)
    else:
        _serve_http(context)


def _serve_stdio(context: ServerContext) -> None:
    from .mcp_server import create_mcp_server

    logger.info("Serving MCP over stdio")
    create_mcp_server(context).run(transport="stdio")


def _serve_http(context: ServerContext) -> None:
    import uvicorn

    from .api.server import create_app

    config: Config = context.config
    logger.info(f"Starting HTTP server on {config.host}:{config.port}")

    try:
        uvicorn.run(
            create_app(context),
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error(f"Server startup failed: {e}")
        raise typer.Exit(1)


@app.command()
def operations(
    json_output: Annotated[bool, typer.Option("--json", help="Machine-output mode")] = False,
) -> None:
    """List the operations exposed to MCP clients."""
    definitions = list_operations()

    if json_output:
        typer.echo(json.dumps([op.model_dump() for op in definitions], indent=2))
        return

    console = Console()
    for op in definitions:
        table = Table(title=f"{op.name}: {op.description}")
        table.add_column("Parameter", style="cyan")
        table.add_column("Type")
        table.add_column("Required")
        table.add_column("Description")
        for name, param in op.parameters.items():
            table.add_row(name, param.type, "yes" if param.required else "no", param.description)
        console.print(table)


if __name__ == "__main__":
    app()
