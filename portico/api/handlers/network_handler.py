"""
Network handler.
Serves the derived hub/cluster/contact projection consumed by the graph
renderer.

Optional node fields that are unset are left out of the JSON, so a
cluster node carries only id, type, name, color and originalId.
"""

from fastapi import APIRouter, Depends

from ...shared.schemas.network import NetworkResponse
from ...shared.services.network_service import NetworkService
from ..dependencies.services import get_network_service

router = APIRouter()


@router.get("", response_model=NetworkResponse, response_model_exclude_none=True)
async def get_network(
    network_service: NetworkService = Depends(get_network_service),
):
    """
    Get the network projection.

    Links are listed cluster→contact first, then hub→cluster.
    """
    return NetworkResponse.model_validate(network_service.get_network())
