"""
Folder management API routes.

Provides CRUD operations for folders to organize requests.
"""

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_store
from ..schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from ..services.store import PersistenceStore


router = APIRouter(prefix="/api/folders", tags=["folders"])


@router.get("", response_model=list[FolderResponse])
def list_folders(store: PersistenceStore = Depends(get_store)):
    """List all folders sorted by name."""
    return store.list_folders()


@router.post("", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
def create_folder(folder_data: FolderCreate, store: PersistenceStore = Depends(get_store)):
    """
    Create a new folder.

    Args:
        folder_data: Folder name and optional parent
        store: Persistence store

    Returns:
        The created folder with assigned ID and timestamps
    """
    return store.create_folder(folder_data.name, folder_data.parent_id)


@router.get("/{folder_id}", response_model=FolderResponse)
def get_folder(folder_id: int, store: PersistenceStore = Depends(get_store)):
    """Get a single folder by ID."""
    return store.get_folder(folder_id)


@router.put("/{folder_id}", response_model=FolderResponse)
def update_folder(
    folder_id: int,
    folder_data: FolderUpdate,
    store: PersistenceStore = Depends(get_store)
):
    """
    Replace a folder's name and parent.

    Returns:
        The folder as stored after the update
    """
    store.update_folder(folder_id, folder_data.name, folder_data.parent_id)
    return store.get_folder(folder_id)


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_folder(folder_id: int, store: PersistenceStore = Depends(get_store)):
    """Delete a folder by ID. Cascades to all sub-folders."""
    store.delete_folder(folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
