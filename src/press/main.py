from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.press.api.middlewares import setup_middlewares
from src.press.api.v1.router import api_router
from src.press.core.config import get_settings
from src.press.core.db import dispose_engine, get_session
from src.press.core.exceptions import setup_exception_handlers
from src.press.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}")

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "artists", "description": "Cover artwork artists"},
    {"name": "sessions", "description": "Login sessions"},
    {"name": "projects", "description": "Ebook production projects"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Ebook production workflow API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check with database validation."""
        try:
            async with get_session() as session:
                await session.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Health check failed", error=str(e))
            return JSONResponse(
                content={"status": "unhealthy", "database": f"unhealthy: {e}"},
                status_code=503,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})

    return app


app = create_app()
