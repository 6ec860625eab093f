from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import Settings, get_settings
from .routers import songs, health

logger = logging.getLogger(__name__)

DESCRIPTION = "API for the music app: songs, covers and metadata"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API around one songs file.

    Tests pass their own Settings; the module-level ``app`` below uses the
    process settings from the environment.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server running at %s", settings.base_url)
        logger.info("Health check available at %s/api/health", settings.base_url)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=DESCRIPTION,
        contact={"name": settings.contact_name, "email": settings.contact_email},
        servers=[{"url": settings.base_url, "description": "Development server"}],
        debug=settings.debug,
        docs_url="/api-docs",
        openapi_url="/api-docs/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.middleware('http')
    async def log_requests(request, call_next):
        logger.info("[HTTP] %s %s", request.method, request.url)
        response = await call_next(request)
        logger.info("[HTTP] -> %s %s %s", response.status_code, request.method, request.url)
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(songs.router)
    app.include_router(health.router)

    @app.get("/", include_in_schema=False)
    async def root():
        return {"app": settings.app_name, "status": "running"}

    return app


app = create_app()
