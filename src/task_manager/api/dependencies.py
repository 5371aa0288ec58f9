"""FastAPI dependencies for the task manager HTTP service."""

from fastapi import Request

from ..context import ServerContext


def get_context(request: Request) -> ServerContext:
    """Get the server context attached to the running application."""
    return request.app.state.context
