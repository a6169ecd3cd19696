"""Customer Health API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AppError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Process-wide collaborators (database manager, service, UI API client)
      live on app.state and are attached by wire_dependencies

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory so tests build isolated apps and wire their own
      database without touching module state
    - UI API client defaults to an in-process ASGI transport: the browser UI
      exercises the real HTTP contract without a second deployment
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from customer_health.api.error_handlers import register_error_handlers
from customer_health.api.routes import checklists, health
from customer_health.client.api_client import ApiClient
from customer_health.client.checklist_api import ChecklistApi
from customer_health.config import Settings, get_settings
from customer_health.infrastructure.checklist_repository import (
    SqlAlchemyChecklistRepository,
)
from customer_health.infrastructure.database import DatabaseSessionManager
from customer_health.infrastructure.observability import setup_logging
from customer_health.services.checklist_service import ChecklistService
from customer_health.web import routes as web_routes
from customer_health.web.templating import STATIC_DIR

logger = logging.getLogger(__name__)

IN_PROCESS_BASE_URL = "http://customer-health.internal"


def build_ui_http_client(app: FastAPI, settings: Settings) -> httpx.AsyncClient:
    """HTTP client the browser UI uses to reach the REST API."""
    if settings.api_base_url:
        return httpx.AsyncClient(
            base_url=settings.api_base_url, timeout=settings.api_timeout_seconds,
        )
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    return httpx.AsyncClient(
        transport=transport,
        base_url=IN_PROCESS_BASE_URL,
        timeout=settings.api_timeout_seconds,
    )


def wire_dependencies(
    app: FastAPI,
    db: DatabaseSessionManager,
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> None:
    """Attach the process-wide collaborators routes resolve from app.state."""
    app.state.settings = settings
    app.state.db = db
    app.state.checklist_service = ChecklistService(
        SqlAlchemyChecklistRepository(db),
    )
    app.state.http_client = http_client or build_ui_http_client(app, settings)
    app.state.checklist_api = ChecklistApi(ApiClient(app.state.http_client))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager.from_url(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await db.create_all()
    wire_dependencies(app, db, settings)
    logger.info("Customer Health API started")
    yield
    logger.info("Customer Health API shutting down")
    await app.state.http_client.aclose()
    await db.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Customer Health API", version="1.0.0", lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(checklists.router)
    app.include_router(web_routes.router)
    app.mount(
        "/ui/static", StaticFiles(directory=str(STATIC_DIR)), name="ui_static",
    )

    @app.get("/", tags=["health"])
    async def root():
        """Liveness — the process is up and serving requests."""
        return {"status": "ok"}

    return app


app = create_app()
