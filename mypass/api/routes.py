"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live            → Health check endpoints
    /api/register, /api/authenticate  → Authentication
    /api/account, /api/users          → Users
    /api/folders, /api/_search/...    → Folders (CRUD, sharing, search)
    /api/secrets                      → Secrets (CRUD)

Usage:
======
    from mypass.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from mypass.api.handlers import (
    auth_handler,
    folder_handler,
    health_handler,
    secret_handler,
    user_handler,
)


API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        auth_handler.router,
        prefix=API_PREFIX,
        tags=["Authentication"],
    )

    app.include_router(
        user_handler.router,
        prefix=API_PREFIX,
        tags=["Users"],
    )

    app.include_router(
        folder_handler.router,
        prefix=API_PREFIX,
        tags=["Folders"],
    )

    app.include_router(
        secret_handler.router,
        prefix=API_PREFIX,
        tags=["Secrets"],
    )
