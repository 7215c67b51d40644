"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns normally and rolled back
when it raises, so every service call in one request shares one
transaction.

Usage:
======
    from mypass.api.dependencies.database import DbSession

    @router.get("/folders/{folder_id}")
    async def get_folder(folder_id: int, db: DbSession):
        return await FolderRepository(db).get(folder_id)

Tests replace this dependency through app.dependency_overrides[get_db].
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mypass.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
