"""
Task Manager MCP Server

Exposes the task registry to MCP clients through a single ``add_task`` tool.
The server context is built once by the caller and handed to every MCP
session through the FastMCP lifespan, so all sessions share one registry.
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Any, AsyncIterator, Dict

from mcp.server.fastmcp import Context, FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.server.transport_security import TransportSecuritySettings
from pydantic import Field

from . import __version__, operations
from .config import Config
from .context import ServerContext
from .errors import TaskRegistryError
from .models import AddTaskRequest

logger = logging.getLogger(__name__)

SERVER_NAME = "task-manager"

SERVER_INSTRUCTIONS = (
    "A task manager MCP server that allows you to add, complete, list, and retrieve tasks "
    "with real-time updates."
)

_ADD_TASK = operations.ADD_TASK_OPERATION

LOOPBACK_HOSTS = ("127.0.0.1", "localhost", "::1")


def transport_security_for(config: Config) -> TransportSecuritySettings:
    """
    Derive Host/Origin header checks from the bind address.

    A loopback bind only accepts loopback Host and Origin headers, which
    blocks DNS-rebinding from browsers. Any other bind is reachable by name
    from remote clients, so header checks are disabled.
    """
    if config.host not in LOOPBACK_HOSTS:
        return TransportSecuritySettings(enable_dns_rebinding_protection=False)

    return TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=["127.0.0.1:*", "localhost:*", "[::1]:*"],
        allowed_origins=["http://127.0.0.1:*", "http://localhost:*", "http://[::1]:*"],
    )


def create_mcp_server(context: ServerContext) -> FastMCP:
    """
    Create the MCP server bound to a shared server context.

    Args:
        context: Server context shared by every session

    Returns:
        Configured FastMCP instance with the ``add_task`` tool registered
    """

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[ServerContext]:
        yield context

    config = context.config
    mcp = FastMCP(
        SERVER_NAME,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=lifespan,
        host=config.host,
        port=config.port,
        log_level=config.log_level,
        streamable_http_path=config.mcp_path,
        transport_security=transport_security_for(config),
    )
    # FastMCP takes no version argument; the low-level server reports this one
    # in the initialize handshake.
    mcp._mcp_server.version = __version__

    @mcp.tool(name=_ADD_TASK.name, description=_ADD_TASK.description)
    async def add_task(
        title: Annotated[str, Field(description=_ADD_TASK.parameters["title"].description)],
        description: Annotated[
            str, Field(description=_ADD_TASK.parameters["description"].description)
        ],
        ctx: Context,
    ) -> Dict[str, Any]:
        server_context: ServerContext = ctx.request_context.lifespan_context
        request = AddTaskRequest(title=title, description=description)

        try:
            response = operations.add_task(server_context, request)
        except TaskRegistryError as e:
            logger.error(f"add_task failed: {e}")
            raise ToolError(f"Internal error: {e}") from e

        return response.model_dump()

    return mcp
