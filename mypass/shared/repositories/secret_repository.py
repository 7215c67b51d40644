"""
Secret Repository

Database operations for secrets.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mypass.shared.repositories.base import BaseRepository
from mypass.shared.models.secret import Secret


class SecretRepository(BaseRepository[Secret]):
    """Repository for Secret database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Secret, session)

    async def find_all(self) -> list[Secret]:
        """Get every secret, ordered by id."""
        result = await self.session.execute(select(Secret).order_by(Secret.id))
        return list(result.scalars().all())

    async def find_by_folder_id(self, folder_id: int) -> list[Secret]:
        """
        Get the secrets stored in a folder.

        SQL Generated:
            SELECT * FROM secrets WHERE folder_id = 42 ORDER BY id
        """
        result = await self.session.execute(
            select(Secret).where(Secret.folder_id == folder_id).order_by(Secret.id)
        )
        return list(result.scalars().all())
