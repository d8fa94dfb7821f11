"""Main FastAPI application."""
import asyncio
import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from crypto_list.api.routes import coins
from crypto_list.core.config import get_settings
from crypto_list.core.logging_config import setup_logging
from crypto_list.services.crypto_list_service import CryptoCoinFetchable, create_crypto_list_service
from crypto_list.services.listing_view_model import CryptoListingViewModel

logger = logging.getLogger(__name__)

settings = get_settings()


def log_load_failure(task: asyncio.Task):
    """Log an exception raised by the startup load task."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error(f"Initial coin load failed: {exc!r}", exc_info=exc)


def create_app(service: Optional[CryptoCoinFetchable] = None) -> FastAPI:
    """Create the application with one listing session.

    Args:
        service: Coin feed service (built from settings if omitted)
    """
    app = FastAPI(
        title="Crypto List",
        description="Cryptocurrency listing with filters and search",
        version="0.1.0",
        docs_url="/docs" if settings.enable_docs else None,
        redoc_url="/redoc" if settings.enable_docs else None,
        openapi_url="/openapi.json" if settings.enable_docs else None
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.view_model = CryptoListingViewModel(service or create_crypto_list_service())
    app.state.initial_load = None

    app.include_router(coins.router)

    @app.on_event("startup")
    async def startup_event():
        """Configure logging and start the initial coin load."""
        setup_logging()
        logger.info("Starting application...")
        app.state.initial_load = asyncio.create_task(app.state.view_model.load())
        app.state.initial_load.add_done_callback(log_load_failure)
        logger.info("Application started successfully")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Cancel a pending initial load."""
        logger.info("Shutting down application...")
        task = app.state.initial_load
        if task is not None and not task.done():
            task.cancel()
        logger.info("Application stopped")

    @app.get("/api")
    async def api_root():
        """API root endpoint."""
        return {
            "message": "Crypto List API",
            "version": "0.1.0",
            "docs": "/docs",
            "feed_url": settings.crypto_list_url
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
