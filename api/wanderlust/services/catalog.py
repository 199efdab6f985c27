"""
Catalog Service - single entry point for destination data access
"""
from typing import List, Optional, Union
import logging

from pydantic import ValidationError

from wanderlust.config import Settings
from wanderlust.schemas.destination import (
    Destination,
    DestinationCreate,
    DestinationFilters,
    DestinationPatchResult,
    DestinationUpdate,
)
from wanderlust.services.backends import (
    BackendError,
    CatalogBackend,
    MockBackend,
    SupabaseBackend,
)

logger = logging.getLogger(__name__)


class CatalogWriteError(Exception):
    """A create/update/delete/upload the caller must report to the user"""
    def __init__(self, operation: str, message: str, original_error: Optional[Exception] = None):
        self.operation = operation
        self.message = message
        self.original_error = original_error
        super().__init__(f"{operation} failed: {message}")


class CatalogService:
    """
    Destination catalog operations used by the routers.

    The backend is chosen once at startup and passed in. Read failures are
    logged and come back as empty results; write failures raise
    CatalogWriteError.
    """

    def __init__(self, backend: CatalogBackend, search_limit: int = 10):
        self.backend = backend
        self.search_limit = search_limit

    @property
    def mode(self) -> str:
        """remote or fallback, fixed for the life of the service"""
        return self.backend.mode

    @property
    def is_remote(self) -> bool:
        return self.mode == "remote"

    # Reads

    def _validate_rows(self, rows: List[dict], operation: str) -> List[Destination]:
        """A malformed row is logged and dropped, the rest are still returned"""
        destinations = []
        for row in rows:
            try:
                destinations.append(Destination.model_validate(row))
            except ValidationError as e:
                row_id = row.get("id") if isinstance(row, dict) else None
                logger.warning(f"Skipping invalid destination {row_id!r} in {operation}: {e}")
        return destinations

    async def list(self, filters: Optional[DestinationFilters] = None) -> List[Destination]:
        active = filters.active() if filters else {}
        try:
            rows = await self.backend.list(active)
        except BackendError as e:
            logger.error(f"Error fetching destinations: {e}")
            return []
        return self._validate_rows(rows, "list")

    async def search(self, term: str) -> List[Destination]:
        if not term or not term.strip():
            return await self.list()

        term = term.strip()
        try:
            rows = await self.backend.search(term, self.search_limit)
        except BackendError as e:
            logger.error(f"Error searching destinations for {term!r}: {e}")
            return []
        return self._validate_rows(rows, "search")[: self.search_limit]

    async def get_by_id(self, destination_id: int) -> Optional[Destination]:
        try:
            row = await self.backend.get(destination_id)
            return Destination.model_validate(row) if row else None
        except (BackendError, ValidationError) as e:
            logger.error(f"Error fetching destination {destination_id}: {e}")
            return None

    async def featured(self, country: str = "Nepal", limit: int = 6) -> List[Destination]:
        """Homepage selection: the top destinations of one country"""
        destinations = await self.list(DestinationFilters(country=country))
        return destinations[:limit]

    # Writes

    async def create(self, payload: DestinationCreate) -> Destination:
        try:
            row = await self.backend.create(payload.model_dump())
            return Destination.model_validate(row)
        except (BackendError, ValidationError) as e:
            logger.error(f"Error creating destination: {e}")
            raise CatalogWriteError("create", str(e), e)

    async def update(
        self, destination_id: int, payload: DestinationUpdate
    ) -> Union[Destination, DestinationPatchResult]:
        changes = payload.changes()
        try:
            row = await self.backend.update(destination_id, changes)
            if self.is_remote:
                return Destination.model_validate(row)
            return DestinationPatchResult.model_validate(row)
        except (BackendError, ValidationError) as e:
            logger.error(f"Error updating destination {destination_id}: {e}")
            raise CatalogWriteError("update", str(e), e)

    async def delete(self, destination_id: int) -> bool:
        try:
            return await self.backend.delete(destination_id)
        except BackendError as e:
            logger.error(f"Error deleting destination {destination_id}: {e}")
            raise CatalogWriteError("delete", e.message, e)

    async def upload_image(self, data: bytes, filename: str, destination_id: int) -> str:
        try:
            return await self.backend.upload_image(data, filename, destination_id)
        except BackendError as e:
            logger.error(f"Error uploading image for destination {destination_id}: {e}")
            raise CatalogWriteError("upload_image", e.message, e)

    async def health_check(self) -> bool:
        return await self.backend.health_check()

    async def close(self):
        await self.backend.close()


def build_catalog_service(settings: Settings, **backend_kwargs) -> CatalogService:
    """
    Pick the backend once from configuration.

    Missing or placeholder Supabase credentials select the seed catalog.
    """
    if settings.supabase_configured:
        logger.info(f"Using Supabase at {settings.SUPABASE_URL}")
        backend: CatalogBackend = SupabaseBackend.from_settings(settings, **backend_kwargs)
    else:
        logger.info("Using mock data - Supabase not configured")
        backend = MockBackend(placeholder_image_url=settings.PLACEHOLDER_IMAGE_URL)

    return CatalogService(backend, search_limit=settings.SEARCH_RESULT_LIMIT)
