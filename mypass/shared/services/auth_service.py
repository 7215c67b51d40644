"""
Authentication Service

Account registration and credential checks.

Service Pattern:
================
    auth_handler → AuthService → UserRepository / AuthorityRepository → Database
                       ↘ SecurityUtils (bcrypt, JWT)

New accounts are granted ROLE_USER. The access token carries the user's
id, login, email and authority names so requests can be authorized
without a database round-trip.

Usage:
======
    from mypass.shared.services.auth_service import AuthService

    service = AuthService(db, cache)
    user, token, expires = await service.register_user(
        login="alice", email="alice@example.com", password="s3cret",
    )
    user, token, expires = await service.login_user("alice", "s3cret")
"""

from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from mypass.config.settings import settings
from mypass.shared.cache import CacheService, USERS_BY_EMAIL_REGION, USERS_BY_LOGIN_REGION
from mypass.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from mypass.shared.core.logging import get_logger
from mypass.shared.mappers.user_mapper import UserMapper
from mypass.shared.models.authority import ROLE_USER
from mypass.shared.repositories.authority_repository import AuthorityRepository
from mypass.shared.repositories.user_repository import UserRepository
from mypass.shared.schemas.user import UserDTO
from mypass.shared.utils.security import SecurityUtils


logger = get_logger("mypass.auth")


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - Account registration
    - Credential verification (login or email + password)
    - Access token generation

    Attributes:
        session: Database session
        repo: UserRepository instance
        authority_repo: AuthorityRepository instance
        cache: Process-wide cache
    """

    def __init__(self, session: AsyncSession, cache: CacheService) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
            cache: Shared cache service
        """
        self.session = session
        self.repo = UserRepository(session)
        self.authority_repo = AuthorityRepository(session)
        self.cache = cache

    async def register_user(
        self,
        login: str,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> Tuple[UserDTO, str, int]:
        """
        Register a new user.

        Args:
            login: Unique login, stored lower-cased
            email: Unique email, stored lower-cased
            password: Plain text password (will be hashed)
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            DuplicateResourceError: If the login or email is already registered
        """
        login = login.strip().lower()
        email = email.strip().lower()

        if await self.repo.login_exists(login):
            raise DuplicateResourceError("Login name already used")
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email is already in use")

        user_role = await self.authority_repo.get_or_create(ROLE_USER)

        user = await self.repo.create(
            login=login,
            email=email,
            password_hash=SecurityUtils.hash_password(password),
            first_name=first_name,
            last_name=last_name,
            activated=True,
            authorities=[user_role],
        )
        logger.info("User registered", user_id=user.id, login=user.login)
        self.cache.invalidate(USERS_BY_LOGIN_REGION, user.login)
        self.cache.invalidate(USERS_BY_EMAIL_REGION, user.email)

        user_dto = UserMapper.to_dto(user)
        access_token, expires_in = self.issue_token(user_dto)
        return user_dto, access_token, expires_in

    async def login_user(
        self,
        username: str,
        password: str,
    ) -> Tuple[UserDTO, str, int]:
        """
        Authenticate a user and generate a token.

        Args:
            username: Login or email
            password: Plain text password

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            AuthenticationError: If credentials are invalid or the account is inactive
        """
        key = username.strip().lower()
        user = await self.repo.get_by_login(key)
        if user is None:
            user = await self.repo.get_by_email(key)

        if user is None or not SecurityUtils.verify_password(password, user.password_hash):
            logger.info("Authentication failed", username=key)
            raise AuthenticationError("Invalid username or password")

        if not user.activated:
            logger.info("Authentication refused for inactive user", login=user.login)
            raise AuthenticationError(f"User {user.login} was not activated")

        user_dto = UserMapper.to_dto(user)
        access_token, expires_in = self.issue_token(user_dto)
        return user_dto, access_token, expires_in

    @staticmethod
    def issue_token(user_dto: UserDTO) -> Tuple[str, int]:
        """Sign an access token for a user; returns (token, expires_in_seconds)."""
        access_token = SecurityUtils.create_access_token(
            data={
                "user_id": user_dto.id,
                "login": user_dto.login,
                "email": user_dto.email,
                "auth": list(user_dto.authorities),
            },
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60  # Convert to seconds
        return access_token, expires_in
