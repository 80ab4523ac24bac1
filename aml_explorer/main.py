"""FastAPI application factory and main entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from aml_explorer.api.dependencies import build_gateway_provider
from aml_explorer.api.routes import router
from aml_explorer.config import get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Explorer: {settings.explorer_base_url}")
    logger.info(f"Data directory: {settings.data_dir}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await app.state.gateway_provider.close()
    logger.info("Cleanup complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Bitcoin anti-money-laundering explorer: per-transaction features "
            "from a block explorer and illicit/licit address-transaction "
            "graphs from Elliptic-style datasets."
        ),
        version=settings.app_version,
        lifespan=lifespan,
    )

    # The explorer gateway itself is built lazily on first use
    app.state.gateway_provider = build_gateway_provider(settings)

    app.include_router(router)

    @app.get("/", tags=["root"])
    async def api_info() -> dict[str, str]:
        """API information endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
            "health": f"{settings.api_prefix}/health",
        }

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "aml_explorer.main:app",
        host="127.0.0.1",
        port=settings.port,
        reload=settings.debug,
        log_level="info",
    )
