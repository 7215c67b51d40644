"""
Database Module

Database connectivity and session management for MyPass.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (session.py)       ← one per request, commit / rollback / close
        │  passed to services
        ▼
    Repositories (repositories/)    ← UserRepository, FolderRepository, ...
        │  SQL
        ▼
    PostgreSQL (SQLite for tests)

Usage in FastAPI:
=================
    from fastapi import Depends
    from mypass.shared.db import get_db
    from mypass.shared.repositories import FolderRepository

    @app.get("/folders/{folder_id}")
    async def get_folder(folder_id: int, db: AsyncSession = Depends(get_db)):
        return await FolderRepository(db).find_one_with_eager_relationships(folder_id)
"""

from mypass.shared.db.session import (
    get_db,
    init_db,
    close_db,
    build_engine,
    build_session_factory,
    after_commit,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",  # FastAPI dependency for getting a database session
    "init_db",  # Verify connectivity on app startup
    "close_db",  # Dispose of the engine on app shutdown
    "build_engine",  # Engine for an arbitrary URL (tests, migrations)
    "build_session_factory",  # Session factory bound to an engine
    "after_commit",  # Run a callback once the current transaction commits
    "AsyncSessionLocal",  # Session factory for manual session creation
    "engine",  # Application engine
]
