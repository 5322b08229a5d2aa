"""FastAPI application serving the generated favicon."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from .composition import create_container
from .container import Container
from .logging_setup import setup_logging_from_env

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PERLINICON_CONFIG_PATH"
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def install_startup_icon(container: Container) -> bool:
    """Generate the favicon once and install it into the icon slot."""
    installed = container.favicon_service.refresh(container.icon_slot)
    if not installed:
        logger.warning("No favicon generated at startup")
    return installed


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    container: Container | None = getattr(app.state, "container", None)
    if container is None:
        setup_logging_from_env()
        config_path = os.environ.get(CONFIG_PATH_ENV, "config.yaml")
        container = create_container(config_path=config_path)
        app.state.container = container

    install_startup_icon(container)
    logger.info("Perlinicon server started")

    yield

    logger.info("Perlinicon server stopped")


def create_app(container: Container | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        container: Pre-wired container; built from the environment at
            startup when omitted.
    """
    app = FastAPI(
        title="Perlinicon",
        description="Procedural Perlin noise favicon generator",
        version="0.1.0",
        lifespan=lifespan,
    )
    if container is not None:
        app.state.container = container

    @app.get("/favicon.png")
    async def favicon(request: Request):
        """Serve the installed favicon as PNG."""
        container: Container = request.app.state.container
        png = container.icon_slot.png
        if png is None:
            return JSONResponse({"error": "no favicon installed"}, status_code=404)
        return Response(content=png, media_type="image/png", headers=NO_CACHE_HEADERS)

    @app.get("/api/favicon")
    async def favicon_data_uri(request: Request):
        """Get the installed favicon as a data URI."""
        container: Container = request.app.state.container
        return {
            "data_uri": container.icon_slot.data_uri or "",
            "size": container.favicon_settings.size,
        }

    @app.post("/api/favicon/regenerate")
    def regenerate(request: Request):
        """Replace the installed favicon with a freshly generated one.

        Synthesis is CPU bound, so this runs in the threadpool rather than
        on the event loop. On failure the previous favicon stays installed.
        """
        container: Container = request.app.state.container
        if not container.favicon_service.refresh(container.icon_slot):
            return JSONResponse(
                {"status": "error", "message": "Favicon generation failed"},
                status_code=500,
            )
        return {"status": "ok", "data_uri": container.icon_slot.data_uri}

    @app.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        container: Container = request.app.state.container
        return {
            "status": "healthy",
            "favicon_installed": not container.icon_slot.is_empty,
        }

    return app
