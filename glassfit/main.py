"""
==============================================================================
Glass Fitment Finder - Application Entry Point
==============================================================================

FastAPI application exposing the matching engine:
- Mobile model autocomplete
- Product resolution for a device
- Combined keyword search
- Screen-resolution device detection

Usage:
------
    # Development
    uvicorn glassfit.main:app --reload

    # Production
    uvicorn glassfit.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from glassfit.api.router import api_router
from glassfit.catalog.loader import load_catalog
from glassfit.catalog.store import CatalogStore
from glassfit.config import get_settings
from glassfit.core.exceptions import CatalogLoadError, register_exception_handlers


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
    - Catalog loading at startup
    - Middleware configuration
    - Router registration
    - Exception handler setup

    A pre-built CatalogStore can be passed in; otherwise the catalog files
    named in the settings are loaded at startup.
    """

    def __init__(self, store: Optional[CatalogStore] = None):
        """Initialize the application."""
        self._settings = get_settings()
        self._store = store
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Find the protective glass that fits a mobile device",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )
        app.state.catalog = self._store

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup(app)
        yield
        logger.info("🛑 Shutting down...")

    def _startup(self, app: FastAPI) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info("=" * 60)

        if app.state.catalog is None:
            app.state.catalog = self._load_catalog()

        logger.info(f"✅ {self._settings.app_name} ready")
        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _load_catalog(self) -> Optional[CatalogStore]:
        """Load catalog files; the API reports CATALOG_NOT_LOADED on failure."""
        try:
            return load_catalog(
                self._settings.models_path,
                self._settings.products_path,
            )
        except CatalogLoadError as e:
            logger.error(f"❌ Failed to load catalog: {e}")
            return None

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the interactive API docs."""
            return RedirectResponse(url="/docs")

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


def create_app(store: Optional[CatalogStore] = None) -> FastAPI:
    """Build an application, optionally over an already-initialized store."""
    return Application(store).app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

app = create_app()


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "glassfit.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
