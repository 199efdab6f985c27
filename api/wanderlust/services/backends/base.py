"""
Base Catalog Backend - Abstract interface for destination storage
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class CatalogBackend(ABC):
    """
    Abstract base class for destination storage backends.

    Backends work with plain row dicts shaped like the `destinations` table;
    validation into schema objects happens in the catalog service.
    """

    # Backend identification
    name: str = "base"
    mode: str = "base"

    @property
    def is_configured(self) -> bool:
        """Check if backend has required configuration (URL, keys, etc.)"""
        return True  # Override in subclasses

    @abstractmethod
    async def list(self, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        List destinations matching every given predicate.

        Args:
            filters: Active predicates only (country, region, min_price,
                max_price, difficulty, season)

        Returns:
            Rows ordered by rating, highest first

        Raises:
            BackendError: If the query fails
        """

    @abstractmethod
    async def search(self, term: str, limit: int) -> List[Dict[str, Any]]:
        """Case-insensitive substring search over name, country, region and description"""

    @abstractmethod
    async def get(self, destination_id: int) -> Optional[Dict[str, Any]]:
        """Single row by id, or None"""

    @abstractmethod
    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a row and return it with id and created_at"""

    @abstractmethod
    async def update(self, destination_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a partial update and return the resulting row"""

    @abstractmethod
    async def delete(self, destination_id: int) -> bool:
        """Hard delete a row"""

    @abstractmethod
    async def upload_image(self, data: bytes, filename: str, destination_id: int) -> str:
        """Store a cover image and return its public URL"""

    async def health_check(self) -> bool:
        """
        Check if the backend is reachable.

        Default implementation returns is_configured.
        """
        return self.is_configured

    async def close(self):
        """Release connections held by the backend"""


class BackendError(Exception):
    """Exception raised when a backend call fails"""
    def __init__(self, backend_name: str, message: str, original_error: Optional[Exception] = None):
        self.backend_name = backend_name
        self.message = message
        self.original_error = original_error
        super().__init__(f"{backend_name}: {message}")
