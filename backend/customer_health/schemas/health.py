"""Health Schemas — shape of the GET /health summary."""

from datetime import datetime
from typing import Literal

from customer_health.schemas.checklist import CamelModel

HealthStatus = Literal["ok", "degraded"]


class HealthSummaryRead(CamelModel):
    status: HealthStatus
    uptime_seconds: int
    region: str
    db_status: HealthStatus
    timestamp: datetime
