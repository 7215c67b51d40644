"""
Authority Repository

Authorities are keyed by name; roles are created on first use.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from mypass.shared.repositories.base import BaseRepository
from mypass.shared.models.authority import Authority


class AuthorityRepository(BaseRepository[Authority]):
    """Repository for Authority rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Authority, session)

    async def get_or_create(self, name: str) -> Authority:
        """
        Get an authority by name, inserting it when missing.

        Args:
            name: Role name, e.g. "ROLE_USER"

        Returns:
            The persisted Authority
        """
        authority = await self.get(name)
        if authority is not None:
            return authority
        return await self.create(name=name)
