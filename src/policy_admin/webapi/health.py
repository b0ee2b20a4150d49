"""Health check endpoints for the policy admin API."""

import platform
import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, Query

from .. import __version__
from ..config.logging import get_logger
from ..config.settings import get_settings
from ..db.database import check_database_health
from ..services import PartyCache, get_party_cache
from .models.responses import HealthResponse, HealthStatus

logger = get_logger(__name__)
router = APIRouter()

# Track application start time for uptime calculation
_app_start_time = time.time()


def check_configuration_health() -> Dict[str, Any]:
    """Check application configuration health."""
    try:
        settings = get_settings()
    except ValueError as e:
        logger.error("Configuration health check failed", error=str(e), exc_info=True)
        return {"status": "unhealthy", "error": str(e)}

    checks = {
        "admin_auth_token_configured": bool(settings.admin_auth_token),
    }
    optional_checks = {
        "firestore_project_configured": bool(settings.firestore_project_id),
        "party_cache_ttl_enabled": settings.party_cache_ttl_seconds > 0,
    }

    return {
        "status": "healthy" if all(checks.values()) else "degraded",
        "checks": {**checks, **optional_checks},
        "environment": settings.environment,
        "python_version": platform.python_version(),
    }


def check_party_cache_health(party_cache: PartyCache) -> Dict[str, Any]:
    """Party cache state; degraded while the last fetch from Firestore failed."""
    stats = party_cache.stats()
    status = "degraded" if stats["last_error"] else "healthy"
    return {"status": status, **stats}


def _overall_status(services: Dict[str, Dict[str, Any]]) -> str:
    statuses = [service.get("status") for service in services.values()]
    if "unhealthy" in statuses:
        return "unhealthy"
    if "degraded" in statuses:
        return "degraded"
    return "healthy"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Configuration, party cache and (optionally) Firestore status",
)
async def health_check(
    deep: bool = Query(False, description="Also probe Firestore with a read"),
    party_cache: PartyCache = Depends(get_party_cache),
) -> HealthResponse:
    """Report service health."""
    services: Dict[str, Dict[str, Any]] = {
        "configuration": check_configuration_health(),
        "party_cache": check_party_cache_health(party_cache),
    }

    if deep:
        services["firestore"] = await check_database_health()

    health = HealthStatus(
        status=_overall_status(services),
        services=services,
        uptime_seconds=round(time.time() - _app_start_time, 3),
        version=__version__,
    )
    logger.debug("Health check completed", status=health.status, deep=deep)
    return HealthResponse(health=health)
