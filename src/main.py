import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

import sentry_sdk
from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from src.config.logging import setup_logging
from src.config.settings import Settings, get_settings
from src.routers.healthz.router import router as healthz_router
from src.rsvps.auth import AdminAuthGate
from src.rsvps.errors import AuthError, RSVPError
from src.rsvps.repository import RSVPStorage, create_storage
from src.rsvps.routers import router as rsvps_router
from src.rsvps.service import RSVPService

logger = logging.getLogger(__name__)


async def run_migrations():
    alembic_cfg = Config("alembic.ini")
    # keep the app logging configuration
    alembic_cfg.attributes["configure_logger"] = False
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    service: RSVPService = app.state.rsvp_service
    storage: RSVPStorage = service.storage

    if settings.RUN_MIGRATIONS_ON_STARTUP and not settings.uses_mongo:
        await run_migrations()
    if not service.auth_gate.configured:
        logger.warning("ADMIN_PASSWORD is not set. /admin will not work.")

    await storage.connect()
    logger.info("Server ready on port %d", settings.port)
    try:
        yield
    finally:
        await storage.close()
        logger.info("Storage connection closed")


async def rsvp_error_handler(request: Request, exc: RSVPError) -> JSONResponse:
    headers = None
    if isinstance(exc, AuthError):
        headers = {"WWW-Authenticate": 'Basic realm="Admin"'}
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)}, headers=headers)


def init_sentry(settings: Settings) -> None:
    if not settings.SENTRY_DSN:
        return
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )


def create_app(settings: Settings | None = None, storage: RSVPStorage | None = None) -> FastAPI:
    """
    Build the application. The storage handle is created here and connected
    by the lifespan, so its lifecycle belongs to whoever runs the app.
    """
    settings = settings or get_settings()
    storage = storage or create_storage(settings)

    app = FastAPI(
        title="Event RSVP API",
        description="Public RSVP form and password-protected admin listing",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.rsvp_service = RSVPService(
        storage=storage,
        auth_gate=AdminAuthGate(settings.admin_password, username=settings.admin_username),
        max_guest_count=settings.max_guest_count,
        list_limit=settings.admin_list_limit,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RSVPError, rsvp_error_handler)

    # Include routers
    app.include_router(healthz_router, tags=["Healthz"])
    app.include_router(rsvps_router, tags=["RSVPs"])

    # Static site last so it never shadows the API
    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
    else:
        logger.warning("Public directory %s not found; static site disabled", public_dir)

    return app


def build_app() -> FastAPI:
    """Entry point for `uvicorn --factory src.main:build_app`."""
    settings = get_settings()
    setup_logging(settings)
    init_sentry(settings)
    return create_app(settings)
