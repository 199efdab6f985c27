"""
Catalog Service Lifecycle & Dependency
"""
from fastapi import FastAPI, Request
import logging

from wanderlust.config import Settings
from wanderlust.services.backends import BackendError, SupabaseBackend
from wanderlust.services.catalog import CatalogService, build_catalog_service

logger = logging.getLogger(__name__)


async def init_catalog(app: FastAPI, settings: Settings, **backend_kwargs) -> CatalogService:
    """
    Build the catalog once and attach it to the application.
    backend_kwargs reach the remote backend (e.g. an httpx transport).
    """
    logger.info("Initializing destination catalog...")
    catalog = build_catalog_service(settings, **backend_kwargs)

    if isinstance(catalog.backend, SupabaseBackend):
        try:
            await catalog.backend.verify_connection()
            logger.info("Successfully connected to Supabase")
        except BackendError as e:
            # Mode stays remote; reads degrade to empty results until it recovers
            logger.error(f"Error connecting to Supabase: {e.message}")

    app.state.catalog = catalog
    logger.info(f"Destination catalog ready ({catalog.mode} mode)")
    return catalog


async def close_catalog(app: FastAPI):
    """Close backend connections"""
    catalog = getattr(app.state, "catalog", None)
    if catalog:
        logger.info("Closing destination catalog...")
        await catalog.close()
        logger.info("Destination catalog closed")


def get_catalog(request: Request) -> CatalogService:
    """
    Dependency that provides the catalog service
    Usage: catalog: CatalogService = Depends(get_catalog)
    """
    return request.app.state.catalog
