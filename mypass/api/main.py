"""
MyPass API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                              MYPASS API                                     │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   Middleware:    CORS → Exception handlers                                  │
│                              │                                              │
│                              ▼                                              │
│   Routers:       Health │ Auth │ Users │ Folders │ Secrets                  │
│                              │                                              │
│                              ▼                                              │
│   Dependencies:  Database session │ Bearer auth │ Services                  │
│                              │                                              │
│                              ▼                                              │
│   app.state.cache:  CacheService (one per application)                      │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Lifecycle:
==========
1. create_application() builds the app and its cache
2. Lifespan startup checks the database connection
3. Application serves requests
4. Lifespan shutdown clears the cache and disposes of the engine

Usage:
======
    # Run on settings.HOST:settings.PORT
    mypass

    # Or with uvicorn directly
    uvicorn mypass.api.main:app --host 0.0.0.0 --port 8080 --reload

    # Or programmatically
    from mypass.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mypass.config.settings import settings
from mypass.shared.cache import CacheService
from mypass.shared.db import init_db, close_db
from mypass.shared.core.logging import logger
from mypass.api.middleware import setup_exception_handlers
from mypass.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Verify the database connection (create tables on SQLite)

    Shutdown:
    - Drop cached entries
    - Close database connections
    """
    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting MyPass API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )

    await init_db()

    logger.info("MyPass API started successfully", cache_regions=app.state.cache.region_names())

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down MyPass API")

    app.state.cache.clear()
    await close_db()

    logger.info("MyPass API shutdown complete")


def create_cache() -> CacheService:
    """Build the application cache with every default region."""
    cache = CacheService(
        max_entries=settings.CACHE_MAX_ENTRIES,
        ttl_seconds=settings.CACHE_TIME_TO_LIVE_SECONDS,
    )
    cache.create_default_regions()
    return cache


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Creates the cache and stores it on app.state
    3. Adds middleware (CORS)
    4. Sets up exception handlers
    5. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Password manager: folders of secrets, shared between users",
        version=settings.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.cache = create_cache()

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "Location",
            "X-Total-Count",
            f"X-{settings.ALERT_APP_NAME}-alert",
            f"X-{settings.ALERT_APP_NAME}-error",
            f"X-{settings.ALERT_APP_NAME}-params",
        ],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


# Create the application instance
app = create_application()


def run() -> None:
    """Serve the application on HOST:PORT (the `mypass` console script)."""
    uvicorn.run(
        "mypass.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )
