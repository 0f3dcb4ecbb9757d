"""
KB Notes Backend — Health Check Route
======================================

What:  Liveness endpoint for Docker health checks and monitoring.
How:   Probes the SQLite file with SELECT 1 and reports catalog size.

Status levels:
    - healthy:   database reachable
    - degraded:  database unreachable; folders and notes are still served
                 from memory, so the check stays HTTP 200
"""

import logging
import time

from fastapi import APIRouter, Depends

from kbnotes import __version__
from kbnotes.database import ping_database
from kbnotes.dependencies import get_catalog
from kbnotes.schemas.envelope import DataEnvelope, HealthStatus
from kbnotes.services.catalog import NoteCatalog

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=DataEnvelope[HealthStatus],
    summary="Service health check",
)
async def health_check(
    catalog: NoteCatalog = Depends(get_catalog),
) -> DataEnvelope[HealthStatus]:
    connected = await ping_database()
    if not connected:
        logger.warning("Health check: database unreachable, serving from memory")

    return DataEnvelope[HealthStatus](
        data=HealthStatus(
            status="healthy" if connected else "degraded",
            version=__version__,
            database="connected" if connected else "disconnected",
            folders=len(catalog.folders),
            uptime_seconds=round(time.time() - _start_time, 2),
        )
    )
