"""
Request management API routes.

Provides CRUD operations for saved HTTP requests.
"""

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_store
from ..schemas.request import RequestCreate, RequestResponse, RequestUpdate
from ..services.store import PersistenceStore


router = APIRouter(prefix="/api/requests", tags=["requests"])


@router.get("", response_model=list[RequestResponse])
def list_requests(store: PersistenceStore = Depends(get_store)):
    """
    List all saved HTTP requests.

    Returns:
        Requests ordered by most recent update first
    """
    return store.list_requests()


@router.post("", response_model=RequestResponse, status_code=status.HTTP_201_CREATED)
def create_request(request_data: RequestCreate, store: PersistenceStore = Depends(get_store)):
    """
    Save a new HTTP request.

    Args:
        request_data: Request configuration data
        store: Persistence store

    Returns:
        The created request with assigned ID and timestamps
    """
    return store.create_request(**request_data.model_dump())


@router.get("/{request_id}", response_model=RequestResponse)
def get_request(request_id: int, store: PersistenceStore = Depends(get_store)):
    """
    Get a single request by ID.

    Raises:
        NotFoundError: 404 if request not found
    """
    return store.get_request(request_id)


@router.put("/{request_id}", response_model=RequestResponse)
def update_request(
    request_id: int,
    request_data: RequestUpdate,
    store: PersistenceStore = Depends(get_store)
):
    """
    Replace every editable field of a request.

    Returns:
        The request as stored after the update
    """
    store.update_request(request_id, **request_data.model_dump())
    return store.get_request(request_id)


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_request(request_id: int, store: PersistenceStore = Depends(get_store)):
    """Delete a request by ID."""
    store.delete_request(request_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
