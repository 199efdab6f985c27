"""
Destination Discovery & Information Endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional
import logging

from wanderlust.utils.catalog import get_catalog
from wanderlust.services.catalog import CatalogService
from wanderlust.schemas.destination import (
    Destination,
    DestinationDetail,
    DestinationFilters,
    DestinationListResponse,
    FilterOptionsResponse,
)
from wanderlust.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=DestinationListResponse)
async def list_destinations(
    q: Optional[str] = Query(None, description="Search name, country, region and description"),
    country: Optional[str] = Query(None),
    region: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    difficulty: Optional[str] = Query(None, description="Easy, Moderate, Challenging or Expert"),
    season: Optional[str] = Query(None, description="Best season, e.g. Autumn"),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    List destinations, or search them when a non-blank query is given.

    A search ignores the filters, the same way the catalog page clears its
    filters when the user searches.
    """
    if q and q.strip():
        destinations = await catalog.search(q)
        return DestinationListResponse(destinations=destinations, total=len(destinations), query=q.strip())

    filters = DestinationFilters(
        country=country,
        region=region,
        min_price=min_price,
        max_price=max_price,
        difficulty=difficulty,
        season=season,
    )
    destinations = await catalog.list(filters)
    return DestinationListResponse(destinations=destinations, total=len(destinations))


@router.get("/featured", response_model=List[Destination])
async def featured_destinations(
    limit: int = Query(settings.FEATURED_LIMIT, ge=1, le=24),
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Featured destinations for the homepage
    """
    return await catalog.featured(country=settings.FEATURED_COUNTRY, limit=limit)


@router.get("/filters", response_model=FilterOptionsResponse)
async def filter_options(catalog: CatalogService = Depends(get_catalog)):
    """
    Values offered by the search bar's filter dropdowns
    """
    destinations = await catalog.list()
    return FilterOptionsResponse(
        countries=sorted({d.country for d in destinations}),
        regions=sorted({d.region for d in destinations if d.region}),
    )


@router.get("/{destination_id}", response_model=DestinationDetail)
async def get_destination(
    destination_id: int,
    catalog: CatalogService = Depends(get_catalog),
):
    """
    Get detailed destination information, with map and directions data
    when the destination has coordinates
    """
    destination = await catalog.get_by_id(destination_id)

    if not destination:
        raise HTTPException(status_code=404, detail="Destination not found")

    return DestinationDetail.from_destination(destination)
