"""FastAPI application setup and routing for the task manager."""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Request

from .. import __version__
from ..config import load_config
from ..context import ServerContext
from ..mcp_server import create_mcp_server
from . import capabilities, health, version
from .dependencies import get_context

logger = logging.getLogger(__name__)


def create_app(context: Optional[ServerContext] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        context: Shared server context; built from the environment if omitted

    Returns:
        Application serving the JSON endpoints under ``/v1`` and the MCP
        endpoint at ``config.mcp_path``
    """
    if context is None:
        context = ServerContext(config=load_config())

    mcp = create_mcp_server(context)
    mcp_app = mcp.streamable_http_app()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        config = context.config
        async with mcp.session_manager.run():
            logger.info(f"Server ready at http://{config.host}:{config.port}{config.mcp_path}")
            yield
        logger.info("MCP session manager stopped")

    app = FastAPI(
        title="Task Manager API",
        description="In-memory task registry served over the Model Context Protocol",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.context = context
    app.state.mcp = mcp

    # Middleware for metrics collection
    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)

        duration = time.perf_counter() - start_time
        endpoint = f"{request.method} {request.url.path}"
        success = 200 <= response.status_code < 400

        context.metrics.record_api_request(endpoint, duration, success)

        return response

    app.include_router(health.router, prefix="/v1", tags=["health"])
    app.include_router(version.router, prefix="/v1", tags=["version"])
    app.include_router(capabilities.router, prefix="/v1", tags=["capabilities"])

    @app.get("/v1/metrics", tags=["monitoring"])
    async def get_metrics(ctx: ServerContext = Depends(get_context)) -> Dict[str, Any]:
        """Get application metrics."""
        summary = ctx.metrics.get_summary()
        summary["registry"] = {"task_count": len(ctx.registry), "next_id": ctx.registry.next_id}
        return summary

    @app.get("/v1/config/status", tags=["monitoring"])
    async def config_status(ctx: ServerContext = Depends(get_context)) -> Dict[str, Any]:
        """Get configuration status (non-sensitive information only)."""
        config = ctx.config
        return {
            "environment": config.environment.value,
            "log_level": config.log_level,
            "host": config.host,
            "port": config.port,
            "mcp_path": config.mcp_path,
        }

    # Mounted last so the /v1 routes above take precedence.
    app.mount("/", mcp_app)

    return app
