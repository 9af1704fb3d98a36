"""
Connection handler.
Handles manually managed connections.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...shared.schemas.connection import ConnectionCreate, ConnectionResponse
from ...shared.services.connection_service import ConnectionService
from ..dependencies.services import get_connection_service

router = APIRouter()


@router.get("", response_model=List[ConnectionResponse])
async def list_connections(
    connection_service: ConnectionService = Depends(get_connection_service),
):
    """
    List all connections, membership edges included.
    """
    return [ConnectionResponse.model_validate(c) for c in connection_service.list_connections()]


@router.post("", response_model=ConnectionResponse, status_code=status.HTTP_201_CREATED)
async def create_connection(
    payload: ConnectionCreate,
    connection_service: ConnectionService = Depends(get_connection_service),
):
    return ConnectionResponse.model_validate(connection_service.create_connection(payload))


@router.delete("/{connection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_connection(
    connection_id: int,
    connection_service: ConnectionService = Depends(get_connection_service),
):
    connection_service.delete_connection(connection_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
