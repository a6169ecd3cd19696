"""Health & Readiness Probes — service metadata and database readiness.

Invariants:
    - GET /health always returns 200 while the process can serve requests;
      database trouble is reported as dbStatus "degraded", not as an error status
    - GET /health/ready returns 503 if the database is unreachable (readiness)

Design Decisions:
    - Separate summary/readiness: the summary feeds the UI banner, readiness
      lets a load balancer drop the instance
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from customer_health.api.deps import get_app_settings
from customer_health.config import Settings
from customer_health.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)
from customer_health.services.health_service import get_health_summary

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(
    db: DatabaseSessionManager = Depends(get_db_manager),
    settings: Settings = Depends(get_app_settings),
):
    """Uptime, region and database status."""
    summary = await get_health_summary(db, settings)
    return {
        **summary,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/ready")
async def readiness_check(
    db: DatabaseSessionManager = Depends(get_db_manager),
):
    """Readiness probe — includes database connectivity."""
    if not await db.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "ok"}}
