"""Health Summary — process uptime, deployment region and database reachability.

Invariants:
    - dbStatus is "ok" iff SELECT 1 succeeds; overall status mirrors it
    - uptimeSeconds counts whole seconds since this module was first imported
    - region is DEPLOYMENT_REGION when set, otherwise the host name
"""

import socket
import time

from customer_health.config import Settings
from customer_health.infrastructure.database import DatabaseSessionManager

_STARTED_AT = time.monotonic()


def uptime_seconds() -> int:
    return round(time.monotonic() - _STARTED_AT)


def resolve_region(settings: Settings) -> str:
    return settings.deployment_region or socket.gethostname()


async def get_health_summary(
    db: DatabaseSessionManager, settings: Settings,
) -> dict:
    db_status = "ok" if await db.health_check() else "degraded"
    return {
        "status": db_status,
        "uptimeSeconds": uptime_seconds(),
        "region": resolve_region(settings),
        "dbStatus": db_status,
    }
