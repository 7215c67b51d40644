"""
User Service

Read-side user lookups used by folder ownership and sharing, served from
the usersByLogin / usersByEmail / User cache regions.

Usage:
======
    service = UserService(db, cache)
    bob = await service.get_user_with_authorities_by_login("bob@example.com")
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mypass.shared.cache import (
    AUTHORITY_REGION,
    CacheService,
    USER_AUTHORITIES_REGION,
    USER_REGION,
    USERS_BY_EMAIL_REGION,
    USERS_BY_LOGIN_REGION,
)
from mypass.shared.core.logging import get_logger
from mypass.shared.mappers.user_mapper import UserMapper
from mypass.shared.models.authority import Authority
from mypass.shared.repositories.user_repository import UserRepository
from mypass.shared.schemas.user import UserDTO


logger = get_logger("mypass.users")

ALL_AUTHORITIES_KEY = "all"


class UserService:
    """
    Service for user lookups.

    Attributes:
        session: Database session
        repo: UserRepository instance
        cache: Process-wide cache
    """

    def __init__(self, session: AsyncSession, cache: CacheService) -> None:
        """
        Initialize UserService.

        Args:
            session: Async database session
            cache: Shared cache service
        """
        self.session = session
        self.repo = UserRepository(session)
        self.cache = cache

    async def get_user_with_authorities_by_login(self, login_or_email: str) -> Optional[UserDTO]:
        """
        Find a user by login, falling back to email.

        Args:
            login_or_email: Login or email, case-insensitive

        Returns:
            The user with authorities, or None
        """
        key = login_or_email.strip().lower()
        if not key:
            return None

        cached = self.cache.get(USERS_BY_LOGIN_REGION, key)
        if cached is None:
            cached = self.cache.get(USERS_BY_EMAIL_REGION, key)
        if cached is not None:
            return cached.model_copy(deep=True)

        user = await self.repo.get_by_login(key)
        if user is None:
            user = await self.repo.get_by_email(key)
        if user is None:
            logger.debug("User not found", login_or_email=key)
            return None

        user_dto = UserMapper.to_dto(user)
        self._remember(user_dto)
        return user_dto

    async def get_user_with_authorities(self, user_id: int) -> Optional[UserDTO]:
        """Find a user by id."""
        cached = self.cache.get(USER_REGION, user_id)
        if cached is not None:
            return cached.model_copy(deep=True)

        user = await self.repo.get(user_id)
        if user is None:
            return None

        user_dto = UserMapper.to_dto(user)
        self._remember(user_dto)
        return user_dto

    async def get_all_users(self, offset: int = 0, limit: int = 20) -> tuple[list[UserDTO], int]:
        """
        Get one page of users, ordered by id.

        Returns:
            Tuple of (users, total number of users)
        """
        users = await self.repo.list(offset=offset, limit=limit, order_by="id")
        total = await self.repo.count()
        return [UserMapper.to_dto(user) for user in users], total

    async def get_authorities(self) -> list[str]:
        """Names of every authority that exists."""
        cached = self.cache.get(AUTHORITY_REGION, ALL_AUTHORITIES_KEY)
        if cached is not None:
            return list(cached)

        result = await self.session.execute(select(Authority.name).order_by(Authority.name))
        names = list(result.scalars().all())
        self.cache.put(AUTHORITY_REGION, ALL_AUTHORITIES_KEY, tuple(names))
        return names

    def _remember(self, user_dto: UserDTO) -> None:
        """Cache a user under its id, login and email."""
        self.cache.put(USER_REGION, user_dto.id, user_dto.model_copy(deep=True))
        self.cache.put(USERS_BY_LOGIN_REGION, user_dto.login, user_dto.model_copy(deep=True))
        if user_dto.email:
            self.cache.put(USERS_BY_EMAIL_REGION, user_dto.email, user_dto.model_copy(deep=True))
        self.cache.put(USER_AUTHORITIES_REGION, user_dto.id, tuple(user_dto.authorities))

    def evict(self, user_dto: UserDTO) -> None:
        """Drop every cache entry for a user."""
        self.cache.invalidate(USER_REGION, user_dto.id)
        self.cache.invalidate(USERS_BY_LOGIN_REGION, user_dto.login)
        if user_dto.email:
            self.cache.invalidate(USERS_BY_EMAIL_REGION, user_dto.email)
        self.cache.invalidate(USER_AUTHORITIES_REGION, user_dto.id)
