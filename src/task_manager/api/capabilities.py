"""Operation discovery endpoints."""

from fastapi import APIRouter, HTTPException

from .. import __version__
from ..models import CapabilitiesResponse, OperationDefinition
from ..operations import get_operation, list_operations

router = APIRouter()


@router.get("/capabilities", response_model=CapabilitiesResponse)
async def get_capabilities() -> CapabilitiesResponse:
    """
    Get task manager capabilities.

    Returns the operations exposed over MCP with their parameter schemas.
    """
    return CapabilitiesResponse(
        operations=list_operations(),
        api_version=__version__,
        features=["health_check", "operation_discovery", "mcp_streamable_http"],
    )


@router.get("/capabilities/{name}", response_model=OperationDefinition)
async def get_capability(name: str) -> OperationDefinition:
    """Get a single operation definition by name."""
    try:
        return get_operation(name)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))
