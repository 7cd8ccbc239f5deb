"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from starlette.middleware.sessions import SessionMiddleware

from workhours.config import Settings, settings as default_settings
from workhours.context import AppContext
from workhours.errors import register_error_handlers
from workhours.routers import admin, work_hours

logger = logging.getLogger(__name__)

INDEX_PAGE = Path(__file__).parent / "static" / "index.html"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    context: AppContext = app.state.context
    # Startup
    await context.startup()
    yield
    # Shutdown
    await context.shutdown()


def create_app(
    settings: Settings | None = None, context: AppContext | None = None
) -> FastAPI:
    """
    Build the application around an explicit context.

    Args:
        settings: Settings to use; defaults to the environment
        context: Prebuilt context; defaults to one built from ``settings``
    """
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="Work Hours API",
        description="Backend API for logging employee work hours",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.context = context or AppContext(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        https_only=settings.session_https_only,
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(work_hours.router)
    app.include_router(admin.router)

    @app.get("/", include_in_schema=False)
    async def root():
        """Landing page with the time entry form."""
        return FileResponse(INDEX_PAGE)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    logger.info("Server listening on port %d", default_settings.port)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
