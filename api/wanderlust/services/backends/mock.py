"""
Mock Catalog Backend - serves the seed destinations when Supabase is not configured
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging
import time

from wanderlust.config import PLACEHOLDER_IMAGE_URL
from wanderlust.services.seed_data import (
    filter_destinations,
    get_seed_destinations,
    matches_search,
    sort_by_rating,
)
from .base import CatalogBackend

logger = logging.getLogger(__name__)


class MockBackend(CatalogBackend):
    """
    Read-only in-memory catalog.

    Writes are answered locally and never stored: a created record does not
    show up in later reads, updates echo the supplied fields and deletes
    always succeed.
    """

    name = "mock"
    mode = "fallback"

    def __init__(self, placeholder_image_url: str = PLACEHOLDER_IMAGE_URL):
        self._placeholder_image_url = placeholder_image_url

    async def list(self, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        rows = filter_destinations(get_seed_destinations(), **filters)
        return sort_by_rating(rows)

    async def search(self, term: str, limit: int) -> List[Dict[str, Any]]:
        rows = [row for row in get_seed_destinations() if matches_search(row, term)]
        return sort_by_rating(rows)[:limit]

    async def get(self, destination_id: int) -> Optional[Dict[str, Any]]:
        for row in get_seed_destinations():
            if row["id"] == destination_id:
                return row
        return None

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Mock: creating destination {payload.get('name')!r}")
        return {
            "id": int(time.time() * 1000),
            **payload,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

    async def update(self, destination_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Mock: updating destination {destination_id} fields={sorted(changes)}")
        return {"id": destination_id, **changes}

    async def delete(self, destination_id: int) -> bool:
        logger.info(f"Mock: deleting destination {destination_id}")
        return True

    async def upload_image(self, data: bytes, filename: str, destination_id: int) -> str:
        logger.info(f"Mock: uploading image for destination {destination_id}")
        return self._placeholder_image_url
