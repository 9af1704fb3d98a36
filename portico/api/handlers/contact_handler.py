"""
Contact handler.
Handles contact CRUD.

Handlers parse the request and delegate to ContactService. A clusterId
that does not resolve is reported by the service as a 400.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...shared.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from ...shared.services.contact_service import ContactService
from ..dependencies.services import get_contact_service

router = APIRouter()


@router.get("", response_model=List[ContactResponse])
async def list_contacts(
    cluster_id: Optional[int] = Query(None, alias="clusterId", description="Filter by cluster"),
    contact_service: ContactService = Depends(get_contact_service),
):
    """
    List contacts.

    Optionally restricted to one cluster with ?clusterId=.
    """
    contacts = contact_service.list_contacts(cluster_id=cluster_id)
    return [ContactResponse.model_validate(c) for c in contacts]


@router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(
    contact_id: int,
    contact_service: ContactService = Depends(get_contact_service),
):
    return ContactResponse.model_validate(contact_service.get_contact(contact_id))


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    payload: ContactCreate,
    contact_service: ContactService = Depends(get_contact_service),
):
    """
    Create a contact.

    The membership edge to its cluster is created with it.
    """
    return ContactResponse.model_validate(contact_service.create_contact(payload))


@router.patch("/{contact_id}", response_model=ContactResponse)
async def update_contact(
    contact_id: int,
    payload: ContactUpdate,
    contact_service: ContactService = Depends(get_contact_service),
):
    """
    Merge the sent fields into a contact.

    Changing clusterId moves the membership edge to the new cluster.
    """
    contact = contact_service.update_contact(contact_id, payload)
    return ContactResponse.model_validate(contact)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: int,
    contact_service: ContactService = Depends(get_contact_service),
):
    contact_service.delete_contact(contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
