"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_login()   → Find user by login
- get_by_email()   → Find user by email address
- login_exists()   → Check if login is taken
- email_exists()   → Check if email is taken

Logins and emails are stored lower-cased; lookups lower-case their input.
Authorities are loaded with every user (selectin relationship).
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mypass.shared.repositories.base import BaseRepository
from mypass.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_login(self, login: str) -> Optional[User]:
        """
        Get user by login, case-insensitive.

        SQL Generated:
            SELECT * FROM users WHERE login = 'alice'
        """
        result = await self.session.execute(select(User).where(User.login == login.lower()))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address, case-insensitive.

        SQL Generated:
            SELECT * FROM users WHERE email = 'alice@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def login_exists(self, login: str) -> bool:
        """Check if a login is already registered."""
        return await self.get_by_login(login) is not None

    async def email_exists(self, email: str) -> bool:
        """Check if an email is already registered."""
        return await self.get_by_email(email) is not None
