"""Route Dependencies — resolve process-wide collaborators from app.state.

Invariants:
    - Collaborators are attached once by main.wire_dependencies (lifespan or tests)
    - A missing collaborator is a startup bug → RuntimeError (500), not a 4xx
"""

from fastapi import Request

from customer_health.config import Settings, get_settings
from customer_health.services.checklist_service import ChecklistService


def get_checklist_service(request: Request) -> ChecklistService:
    service = getattr(request.app.state, "checklist_service", None)
    if service is None:
        raise RuntimeError("Checklist service not initialized")
    return service


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()
