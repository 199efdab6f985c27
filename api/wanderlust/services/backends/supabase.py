"""
Supabase Catalog Backend - PostgREST table API and Storage API over httpx
https://supabase.com/docs/guides/api
"""
from typing import Any, Dict, List, Optional, Tuple
import mimetypes
import time
import httpx
import logging
from tenacity import retry, stop_after_attempt, wait_exponential

from wanderlust.config import Settings
from .base import CatalogBackend, BackendError

logger = logging.getLogger(__name__)

# filter name -> (column, PostgREST operator)
FILTER_COLUMNS: Dict[str, Tuple[str, str]] = {
    "country": ("country", "eq"),
    "region": ("region", "eq"),
    "min_price": ("price", "gte"),
    "max_price": ("price", "lte"),
    "difficulty": ("difficulty_level", "eq"),
    "season": ("best_season", "eq"),
}

SEARCH_COLUMNS = ("name", "country", "region", "description")


def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quote(term: str) -> str:
    """Quote a value for use inside a PostgREST logic tree like or=(...)"""
    escaped = term.replace("\\", "\\\\").replace('"', '\\"')
    return f'"*{escaped}*"'


class SupabaseBackend(CatalogBackend):
    """
    Destination storage on a Supabase project.

    Reads and writes go to the `destinations` table through PostgREST;
    cover images go to a Storage bucket and are served from its public URL.
    No client-side timeout unless one is configured.
    """

    name = "supabase"
    mode = "remote"

    def __init__(
        self,
        url: str,
        anon_key: str,
        table: str = "destinations",
        bucket: str = "images",
        storage_prefix: str = "destination-images",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url.rstrip("/")
        self._anon_key = anon_key
        self.table = table
        self.bucket = bucket
        self.storage_prefix = storage_prefix.strip("/")
        self._client = httpx.AsyncClient(
            base_url=self.url,
            headers={
                "apikey": anon_key,
                "Authorization": f"Bearer {anon_key}",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "SupabaseBackend":
        return cls(
            url=settings.SUPABASE_URL.strip(),
            anon_key=settings.SUPABASE_ANON_KEY.strip(),
            table=settings.SUPABASE_TABLE,
            bucket=settings.SUPABASE_STORAGE_BUCKET,
            storage_prefix=settings.SUPABASE_STORAGE_PREFIX,
            timeout=settings.SUPABASE_TIMEOUT_SECONDS,
            **kwargs,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self._anon_key)

    @property
    def _table_path(self) -> str:
        return f"/rest/v1/{self.table}"

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise BackendError(
                self.name, f"HTTP {e.response.status_code}: {e.response.text[:200]}", e
            )
        except httpx.HTTPError as e:
            raise BackendError(self.name, str(e) or e.__class__.__name__, e)

    def _filter_params(self, filters: Dict[str, Any]) -> List[Tuple[str, str]]:
        params = []
        for key, value in filters.items():
            if key not in FILTER_COLUMNS or not value:
                continue
            column, op = FILTER_COLUMNS[key]
            params.append((column, f"{op}.{_format_value(value)}"))
        return params

    async def list(self, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        params = [("select", "*"), ("order", "rating.desc")]
        params.extend(self._filter_params(filters))
        response = await self._request("GET", self._table_path, params=params)
        return response.json() or []

    async def search(self, term: str, limit: int) -> List[Dict[str, Any]]:
        pattern = _quote(term)
        conditions = ",".join(f"{column}.ilike.{pattern}" for column in SEARCH_COLUMNS)
        params = [
            ("select", "*"),
            ("or", f"({conditions})"),
            ("order", "rating.desc"),
            ("limit", str(limit)),
        ]
        response = await self._request("GET", self._table_path, params=params)
        return response.json() or []

    async def get(self, destination_id: int) -> Optional[Dict[str, Any]]:
        params = [("select", "*"), ("id", f"eq.{destination_id}"), ("limit", "1")]
        response = await self._request("GET", self._table_path, params=params)
        rows = response.json() or []
        return rows[0] if rows else None

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._request(
            "POST",
            self._table_path,
            json=[payload],
            headers={"Prefer": "return=representation"},
        )
        rows = response.json() or []
        if not rows:
            raise BackendError(self.name, "insert returned no row")
        return rows[0]

    async def update(self, destination_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._request(
            "PATCH",
            self._table_path,
            params=[("id", f"eq.{destination_id}")],
            json=changes,
            headers={"Prefer": "return=representation"},
        )
        rows = response.json() or []
        if not rows:
            raise BackendError(self.name, f"destination {destination_id} not found")
        return rows[0]

    async def delete(self, destination_id: int) -> bool:
        await self._request("DELETE", self._table_path, params=[("id", f"eq.{destination_id}")])
        return True

    def object_path(self, filename: str, destination_id: int, timestamp_ms: Optional[int] = None) -> str:
        """<prefix>/<id>-<epoch ms>.<ext>, extension from the uploaded file name"""
        ext = filename.rsplit(".", 1)[-1] if "." in filename else ""
        stamp = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
        key = f"{self.storage_prefix}/{destination_id}-{stamp}"
        return f"{key}.{ext}" if ext else key

    def public_url(self, path: str) -> str:
        return f"{self.url}/storage/v1/object/public/{self.bucket}/{path}"

    async def upload_image(self, data: bytes, filename: str, destination_id: int) -> str:
        path = self.object_path(filename, destination_id)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        await self._request(
            "POST",
            f"/storage/v1/object/{self.bucket}/{path}",
            content=data,
            headers={"Content-Type": content_type, "x-upsert": "false"},
        )
        logger.info(f"Uploaded image for destination {destination_id} to {path}")
        return self.public_url(path)

    async def health_check(self) -> bool:
        try:
            await self._request("GET", self._table_path, params=[("select", "id"), ("limit", "1")])
            return True
        except BackendError as e:
            logger.warning(f"Supabase health check failed: {e.message}")
            return False

    @retry(stop=stop_after_attempt(3), wait=wait_exponential(multiplier=1, min=2, max=10), reraise=True)
    async def verify_connection(self):
        """Startup probe; raises BackendError once retries are exhausted"""
        await self._request("GET", self._table_path, params=[("select", "id"), ("limit", "1")])

    async def close(self):
        await self._client.aclose()
