"""
tests/conftest.py -- Shared fixtures for the MyPass test suite.

This module provides:
  - engine / session_factory / db: a fresh in-memory SQLite database per test
  - cache: a CacheService with every default region
  - make_user(): inserts a user with roles and returns it
  - auth_headers(): Authorization header carrying a token for a user
  - app / client: the real FastAPI app over httpx ASGITransport, with the
    database session and the cache replaced through dependency_overrides

Settings are read from the environment when mypass is first imported, so the
variables below must be set before any mypass import.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["APP_ENV"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

from typing import AsyncGenerator, Iterable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from mypass.api.dependencies.database import get_db
from mypass.api.dependencies.services import get_cache
from mypass.api.main import create_application
from mypass.shared.cache import CacheService
from mypass.shared.db import build_engine, build_session_factory
from mypass.shared.mappers.user_mapper import UserMapper
from mypass.shared.models import Base, ROLE_USER, User
from mypass.shared.repositories.authority_repository import AuthorityRepository
from mypass.shared.repositories.user_repository import UserRepository
from mypass.shared.services.auth_service import AuthService
from mypass.shared.utils.security import SecurityUtils


TEST_PASSWORD = "password"


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture
async def engine():
    """In-memory database with the full schema, dropped after the test."""
    engine = build_engine("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def cache() -> CacheService:
    cache = CacheService(max_entries=100, ttl_seconds=3600)
    cache.create_default_regions()
    return cache


# ---------------------------------------------------------------------------
# Users and tokens
# ---------------------------------------------------------------------------


async def make_user(
    session: AsyncSession,
    login: str,
    email: str | None = None,
    authorities: Iterable[str] = (ROLE_USER,),
    activated: bool = True,
) -> User:
    """Insert and commit a user whose password is TEST_PASSWORD."""
    authority_repo = AuthorityRepository(session)
    roles = [await authority_repo.get_or_create(name) for name in authorities]
    user = await UserRepository(session).create(
        login=login,
        email=email or f"{login}@example.com",
        password_hash=SecurityUtils.hash_password(TEST_PASSWORD),
        activated=activated,
        authorities=roles,
    )
    await session.commit()
    return user


def auth_headers(user: User) -> dict[str, str]:
    token, _expires_in = AuthService.issue_token(UserMapper.to_dto(user))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def users(session_factory) -> dict[str, User]:
    """alice, bob and carol (ROLE_USER) plus admin (ROLE_USER, ROLE_ADMIN)."""
    async with session_factory() as session:
        return {
            "alice": await make_user(session, "alice"),
            "bob": await make_user(session, "bob"),
            "carol": await make_user(session, "carol"),
            "admin": await make_user(session, "admin", authorities=("ROLE_USER", "ROLE_ADMIN")),
        }


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


@pytest.fixture
def app(session_factory, cache):
    """The API wired to the test database and cache. Lifespan is not run."""
    application = create_application()

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_cache] = lambda: cache
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    # Unhandled errors are answered with 500 by the app instead of re-raised here
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
