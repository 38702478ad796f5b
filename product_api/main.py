"""
==============================================================================
Product API - Application Entry Point
==============================================================================

FastAPI application serving the in-memory product catalog:
- RESTful CRUD endpoints under /api/v1/products
- Health probes under /api/v1/health

Usage:
------
    # Development
    uvicorn product_api.main:app --reload

    # Production
    uvicorn product_api.main:app --host 0.0.0.0 --port 9090

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_api.config import Settings, get_settings
from product_api.core.exceptions import register_exception_handlers
from product_api.api.router import api_router
from product_api.catalog import ProductStore


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Product store creation and seeding
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[ProductStore] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
            store: Product store to serve (a new store if None)
        """
        self._settings = settings or get_settings()
        self._store = store if store is not None else self._create_store()
        self._app = self._create_app()

    def _create_store(self) -> ProductStore:
        """Create the product store, seeded if configured."""
        store = ProductStore()
        if self._settings.seed_sample_products:
            store.seed_sample_products()
        return store

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        docs_enabled = not self._settings.is_production

        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="In-memory product catalog API",
            lifespan=self._lifespan,
            docs_url="/docs" if docs_enabled else None,
            redoc_url="/redoc" if docs_enabled else None,
        )

        # The store lives as long as the app
        app.state.product_store = self._store

        # Configure middleware
        self._configure_middleware(app)

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info(f"📦 Products in store: {len(self._store)}")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        logger.info("✅ Shutdown complete")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app

    @property
    def store(self) -> ProductStore:
        """Get the product store served by this application."""
        return self._store


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProductStore] = None
) -> FastAPI:
    """Build a new FastAPI application with its own product store."""
    return Application(settings, store).app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
