"""
Folder Repository

Database operations for folders, always returning folders with their
relations loaded so they can be mapped outside of an I/O context.

Common Operations:
==================
- find_all_with_eager_relationships()        → Every folder, owner/secrets/sharedWiths loaded
- find_page_with_eager_relationships()       → Same, one page at a time
- find_one_with_eager_relationships()        → One folder, or None
- find_by_user_has_access()                  → Folders a login owns or was shared
- search_by_name()                           → Case-insensitive name search
"""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.functions import count as sql_count

from mypass.shared.repositories.base import BaseRepository
from mypass.shared.models.folder import Folder
from mypass.shared.models.user import User


class FolderRepository(BaseRepository[Folder]):
    """
    Repository for Folder database operations.

    Results are ordered by id.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize FolderRepository.

        Args:
            session: Async database session
        """
        super().__init__(Folder, session)

    @staticmethod
    def _eager(include_secrets: bool = True) -> list:
        """Loader options for the folder relations."""
        options = [
            selectinload(Folder.owner),
            selectinload(Folder.shared_withs),
        ]
        if include_secrets:
            options.append(selectinload(Folder.secrets))
        return options

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_all_with_eager_relationships(self) -> list[Folder]:
        """Get every folder with owner, secrets and sharedWiths loaded."""
        result = await self.session.execute(
            select(Folder)
            .options(*self._eager())
            .order_by(Folder.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def find_page_with_eager_relationships(
        self,
        offset: int,
        limit: int,
    ) -> tuple[list[Folder], int]:
        """
        Get one page of folders with relations loaded.

        Returns:
            Tuple of (folders on the page, total number of folders)
        """
        total = await self.session.scalar(select(sql_count()).select_from(Folder)) or 0
        result = await self.session.execute(
            select(Folder)
            .options(*self._eager())
            .order_by(Folder.id)
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all()), total

    async def find_one_with_eager_relationships(self, folder_id: int) -> Optional[Folder]:
        """
        Get one folder with relations loaded.

        Like every read here it uses populate_existing, so a folder already in
        the identity map is refreshed (new owner, sharedWiths and secrets).
        """
        result = await self.session.execute(
            select(Folder)
            .options(*self._eager())
            .where(Folder.id == folder_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def find_by_user_has_access(self, login: str) -> list[Folder]:
        """
        Get folders owned by, or shared with, the given login.

        Secrets are not loaded.

        SQL Generated:
            SELECT folders.* FROM folders
            WHERE EXISTS (SELECT 1 FROM users WHERE users.id = folders.owner_id
                          AND users.login = 'alice')
               OR EXISTS (SELECT 1 FROM folder_shared_with, users
                          WHERE folders.id = folder_shared_with.folder_id
                          AND users.id = folder_shared_with.shared_with_id
                          AND users.login = 'alice')
            ORDER BY folders.id
        """
        login = login.lower()
        result = await self.session.execute(
            select(Folder)
            .options(*self._eager(include_secrets=False))
            .where(
                or_(
                    Folder.owner.has(User.login == login),
                    Folder.shared_withs.any(User.login == login),
                )
            )
            .order_by(Folder.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def search_by_name(self, query: str) -> list[Folder]:
        """Get folders whose name contains the query, case-insensitive."""
        result = await self.session.execute(
            select(Folder)
            .options(*self._eager())
            .where(Folder.name.ilike(f"%{query}%"))
            .order_by(Folder.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())
