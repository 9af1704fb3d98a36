"""
Cluster handler.
Handles cluster CRUD.

ARCHITECTURE NOTE:
This handler follows the layered architecture:
  Handler → Service → NetworkStore → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic (name uniqueness, cascades) belongs in the SERVICE and
STORE layers. Errors raised there are translated to JSON by the global
exception handlers.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...shared.schemas.cluster import ClusterCreate, ClusterResponse, ClusterUpdate
from ...shared.services.cluster_service import ClusterService
from ..dependencies.services import get_cluster_service

router = APIRouter()


@router.get("", response_model=List[ClusterResponse])
async def list_clusters(
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """
    List all clusters in insertion order.
    """
    return [ClusterResponse.model_validate(c) for c in cluster_service.list_clusters()]


@router.get("/{cluster_id}", response_model=ClusterResponse)
async def get_cluster(
    cluster_id: int,
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """
    Get a single cluster.

    404 if the cluster does not exist.
    """
    return ClusterResponse.model_validate(cluster_service.get_cluster(cluster_id))


@router.post("", response_model=ClusterResponse, status_code=status.HTTP_201_CREATED)
async def create_cluster(
    payload: ClusterCreate,
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """
    Create a cluster.

    400 if name or color is missing, 409 if the name is already taken.
    """
    return ClusterResponse.model_validate(cluster_service.create_cluster(payload))


@router.patch("/{cluster_id}", response_model=ClusterResponse)
async def update_cluster(
    cluster_id: int,
    payload: ClusterUpdate,
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """
    Merge the sent fields into a cluster.
    """
    return ClusterResponse.model_validate(cluster_service.update_cluster(cluster_id, payload))


@router.delete("/{cluster_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cluster(
    cluster_id: int,
    cluster_service: ClusterService = Depends(get_cluster_service),
):
    """
    Delete a cluster.

    Its contacts, and every connection touching the cluster or those
    contacts, are removed in the same call.
    """
    cluster_service.delete_cluster(cluster_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
