"""
Health Check Endpoints
"""
from fastapi import APIRouter, Depends

from wanderlust.utils.catalog import get_catalog
from wanderlust.services.catalog import CatalogService

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": "wanderlust-api"}


@router.get("/health/ready")
async def readiness_check(catalog: CatalogService = Depends(get_catalog)):
    """
    Readiness check - reports the catalog mode and, in remote mode,
    whether Supabase answers
    """
    checks = {
        "catalog_mode": catalog.mode,
        "catalog": False,
    }

    # The seed catalog is always available
    checks["catalog"] = await catalog.health_check()

    return {
        "status": "ready" if checks["catalog"] else "degraded",
        "checks": checks
    }


@router.get("/health/live")
async def liveness_check():
    """Liveness check - is the service running"""
    return {"status": "alive"}
