"""
Folder Service

Business logic for folders: saving with a fresh modification time, eager
reads, the access query behind "my folders", and cache maintenance.

Service Pattern:
================
    Handler → FolderService → FolderRepository / UserRepository → Database
                  ↘ CacheService ("Folder" region)

Cached FolderDTOs are deep-copied on the way in and out, so callers may
mutate what they get (the share flow does) without touching the cache.

Usage:
======
    service = FolderService(db, cache)
    folder = await service.save(FolderDTO(name="Finance", owner_id=user.id))
    mine = await service.get_current_user_folders("alice")
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from mypass.shared.cache import (
    CacheService,
    FOLDER_REGION,
    FOLDER_SECRETS_REGION,
    FOLDER_SHARED_WITHS_REGION,
)
from mypass.shared.core.exceptions import FolderNotFoundError
from mypass.shared.core.logging import get_logger
from mypass.shared.db import after_commit
from mypass.shared.mappers.folder_mapper import FolderMapper
from mypass.shared.models.base import utc_now
from mypass.shared.repositories.folder_repository import FolderRepository
from mypass.shared.repositories.user_repository import UserRepository
from mypass.shared.schemas.folder import FolderDTO


logger = get_logger("mypass.folders")


class FolderService:
    """
    Service for folder business logic.

    Attributes:
        session: Database session
        repo: FolderRepository instance
        user_repo: UserRepository instance, resolves sharedWiths
        cache: Process-wide cache
    """

    def __init__(self, session: AsyncSession, cache: CacheService) -> None:
        """
        Initialize FolderService.

        Args:
            session: Async database session
            cache: Shared cache service
        """
        self.session = session
        self.repo = FolderRepository(session)
        self.user_repo = UserRepository(session)
        self.cache = cache

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def save(self, folder_dto: FolderDTO) -> FolderDTO:
        """
        Save a folder.

        Inserts when the DTO has no id, otherwise replaces the stored folder's
        name, owner and sharedWiths with the DTO's. `modified` is always set
        to now. Ids are only ever assigned by the database.

        Args:
            folder_dto: The folder to save

        Returns:
            The persisted folder with its relations

        Raises:
            FolderNotFoundError: If the DTO carries an id that is not stored
        """
        logger.debug("Request to save Folder", folder_id=folder_dto.id, name=folder_dto.name)

        folder_dto = folder_dto.model_copy(update={"modified": utc_now()})
        shared_withs = await self.user_repo.get_by_ids(sorted(folder_dto.shared_with_ids))

        existing = None
        if folder_dto.id is not None:
            existing = await self.repo.find_one_with_eager_relationships(folder_dto.id)
            if existing is None:
                raise FolderNotFoundError(folder_dto.id)

        folder = FolderMapper.to_entity(folder_dto, shared_withs, existing)
        folder = await self.repo.save(folder)
        self.evict(folder.id)

        saved = await self.repo.find_one_with_eager_relationships(folder.id)
        return FolderMapper.to_dto(saved)

    async def delete(self, folder_id: int) -> None:
        """
        Delete the folder by id.

        Deleting a missing folder is a no-op. A folder that still holds
        secrets is rejected by the store and the error propagates.

        Args:
            folder_id: The id of the folder
        """
        logger.debug("Request to delete Folder", folder_id=folder_id)
        deleted = await self.repo.delete(folder_id)
        self.evict(folder_id)
        if not deleted:
            logger.debug("Folder to delete was not found", folder_id=folder_id)

    def evict(self, folder_id: int) -> None:
        """
        Drop every cache entry derived from this folder.

        Runs now and again once the transaction commits, so a read that
        re-cached the folder before the commit does not outlive it.
        """
        self._invalidate(folder_id)
        after_commit(self.session, lambda: self._invalidate(folder_id))

    def _invalidate(self, folder_id: int) -> None:
        self.cache.invalidate(FOLDER_REGION, folder_id)
        self.cache.invalidate(FOLDER_SHARED_WITHS_REGION, folder_id)
        self.cache.invalidate(FOLDER_SECRETS_REGION, folder_id)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def find_all(self) -> list[FolderDTO]:
        """
        Get all the folders, relations loaded.

        Returns:
            Every folder
        """
        logger.debug("Request to get all Folders")
        folders = await self.repo.find_all_with_eager_relationships()
        return [FolderMapper.to_dto(folder) for folder in folders]

    async def find_all_paged(self, page: int, size: int) -> tuple[list[FolderDTO], int]:
        """
        Get one page of folders, relations loaded.

        Args:
            page: Page number, 0-indexed
            size: Page size

        Returns:
            Tuple of (folders, total number of folders)
        """
        logger.debug("Request to get a page of Folders", page=page, size=size)
        folders, total = await self.repo.find_page_with_eager_relationships(
            offset=page * size,
            limit=size,
        )
        return [FolderMapper.to_dto(folder) for folder in folders], total

    async def find_one(self, folder_id: int) -> Optional[FolderDTO]:
        """
        Get one folder by id.

        Args:
            folder_id: The id of the folder

        Returns:
            The folder, or None if absent
        """
        logger.debug("Request to get Folder", folder_id=folder_id)

        cached = self.cache.get(FOLDER_REGION, folder_id)
        if cached is not None:
            return cached.model_copy(deep=True)

        folder = await self.repo.find_one_with_eager_relationships(folder_id)
        if folder is None:
            return None

        folder_dto = FolderMapper.to_dto(folder)
        self.cache.put(FOLDER_REGION, folder_id, folder_dto.model_copy(deep=True))
        return folder_dto

    async def get_current_user_folders(self, login: str) -> list[FolderDTO]:
        """
        Get the folders a user owns or has been shared.

        Secrets are left empty, callers attach them when asked to.

        Args:
            login: Login of the authenticated user

        Returns:
            Accessible folders, ordered by id
        """
        logger.debug("Request to get Folders for current user", login=login)
        folders = await self.repo.find_by_user_has_access(login)
        return [FolderMapper.to_dto(folder, include_secrets=False) for folder in folders]

    async def search(self, query: str) -> list[FolderDTO]:
        """
        Search folders by name.

        Args:
            query: Text the folder name must contain (case-insensitive)

        Returns:
            Matching folders
        """
        logger.debug("Request to search for a page of Folders", query=query)
        folders = await self.repo.search_by_name(query)
        return [FolderMapper.to_dto(folder) for folder in folders]
