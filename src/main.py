"""
Main application entry point for the Energy Price API service.
Initializes the FastAPI app, logging and error handling.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from src.api.errors import PrettyJSONResponse, register_error_handling
from src.api.routes import router as api_router
from src.config import Settings, get_settings
from src.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Energy Price API started", data_dir=settings.data_dir, timezone=settings.timezone)
        yield

    app = FastAPI(
        title="Energy Price API",
        description="Zonneplan electricity and gas prices, ranked and cached per day",
        version="1.0.0",
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        default_response_class=PrettyJSONResponse,
        lifespan=lifespan,
    )

    app.dependency_overrides[get_settings] = lambda: settings
    register_error_handling(app)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
