"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's db session. The
cache is the one CacheService built by create_application() and kept on
app.state; it outlives requests.

Usage:
======
    from mypass.api.dependencies.services import get_folder_service

    @router.get("/folders/{folder_id}")
    async def get_folder(
        folder_id: int,
        folder_service: FolderService = Depends(get_folder_service),
    ):
        return await folder_service.find_one(folder_id)
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from mypass.api.dependencies.database import get_db
from mypass.shared.cache import CacheService
from mypass.shared.services.auth_service import AuthService
from mypass.shared.services.folder_service import FolderService
from mypass.shared.services.secret_service import SecretService
from mypass.shared.services.user_service import UserService


def get_cache(request: Request) -> CacheService:
    """The application-wide cache."""
    return request.app.state.cache


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db, cache)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
) -> UserService:
    """
    Dependency to get UserService instance.
    """
    return UserService(db, cache)


async def get_folder_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
) -> FolderService:
    """
    Dependency to get FolderService instance.
    """
    return FolderService(db, cache)


async def get_secret_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
) -> SecretService:
    """
    Dependency to get SecretService instance.
    """
    return SecretService(db, cache)
