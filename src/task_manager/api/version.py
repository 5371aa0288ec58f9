"""Version information for the task manager API."""

from fastapi import APIRouter
from pydantic import BaseModel

from .. import __version__
from ..mcp_server import SERVER_NAME

# API version follows semantic versioning
API_VERSION = __version__

router = APIRouter()


class VersionInfo(BaseModel):
    """Version information response."""

    api_version: str
    server_name: str
    deprecated_features: list[str] = []


@router.get("/version", response_model=VersionInfo)
async def get_version() -> VersionInfo:
    """
    Get API version and server identity.

    Returns:
        VersionInfo: API version, MCP server name, and deprecated features
    """
    return VersionInfo(
        api_version=API_VERSION,
        server_name=SERVER_NAME,
        deprecated_features=[],
    )
