"""
Admin Destination Management Endpoints
Create, edit, delete destinations and upload cover images
"""
from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile, status
from typing import Optional
import logging

from wanderlust.utils.catalog import get_catalog
from wanderlust.services.catalog import CatalogService, CatalogWriteError
from wanderlust.services.seed_data import matches_search
from wanderlust.schemas.destination import (
    AdminDestinationListResponse,
    DeleteResponse,
    Destination,
    DestinationCreate,
    DestinationPatchResult,
    DestinationUpdate,
    ImageUploadResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)

SAVE_ERROR = "Error saving destination. Please try again."
DELETE_ERROR = "Error deleting destination. Please try again."
UPLOAD_ERROR = "Error uploading image. Please try again."

# The admin search box looks at fewer fields than the public search
ADMIN_SEARCH_FIELDS = ("name", "country", "region")


@router.get("", response_model=AdminDestinationListResponse)
async def admin_list_destinations(
    search: Optional[str] = Query(None, description="Filter by name, country or region"),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    All destinations, narrowed by the admin search box
    """
    destinations = await catalog.list()
    matched = destinations
    if search and search.strip():
        matched = [
            d for d in destinations
            if matches_search(d.model_dump(), search.strip(), ADMIN_SEARCH_FIELDS)
        ]

    return AdminDestinationListResponse(
        destinations=matched,
        total=len(destinations),
        matched=len(matched),
    )


@router.post("", response_model=Destination, status_code=status.HTTP_201_CREATED)
async def create_destination(
    payload: DestinationCreate,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Create a destination; id and created_at are assigned by the catalog
    """
    try:
        destination = await catalog.create(payload)
    except CatalogWriteError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=SAVE_ERROR)

    logger.info(f"Created destination {destination.id} ({destination.name})")
    return destination


@router.patch("/{destination_id}")
async def update_destination(
    destination_id: int,
    payload: DestinationUpdate,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Partially update a destination - only supplied fields change
    """
    try:
        result = await catalog.update(destination_id, payload)
    except CatalogWriteError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=SAVE_ERROR)

    if isinstance(result, DestinationPatchResult):
        return result.model_dump(exclude_unset=True)
    return result.model_dump()


@router.delete("/{destination_id}", response_model=DeleteResponse)
async def delete_destination(
    destination_id: int,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Permanently delete a destination
    """
    try:
        deleted = await catalog.delete(destination_id)
    except CatalogWriteError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=DELETE_ERROR)

    return DeleteResponse(deleted=deleted, id=destination_id)


@router.post("/{destination_id}/image", response_model=ImageUploadResponse)
async def upload_destination_image(
    destination_id: int,
    file: UploadFile = File(...),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Upload a cover image and point the destination's image_url at it
    """
    data = await file.read()

    try:
        image_url = await catalog.upload_image(data, file.filename or "", destination_id)
    except CatalogWriteError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=UPLOAD_ERROR)

    try:
        await catalog.update(destination_id, DestinationUpdate(image_url=image_url))
    except CatalogWriteError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=SAVE_ERROR)

    return ImageUploadResponse(image_url=image_url, destination_id=destination_id)
