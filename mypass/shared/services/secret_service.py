"""
Secret Service

CRUD for secrets, which always belong to one folder. Writes evict the
cached secret and everything cached for its folder.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from mypass.shared.cache import (
    CacheService,
    FOLDER_REGION,
    FOLDER_SECRETS_REGION,
    SECRET_REGION,
)
from mypass.shared.core.exceptions import FolderNotFoundError, SecretNotFoundError
from mypass.shared.core.logging import get_logger
from mypass.shared.db import after_commit
from mypass.shared.mappers.secret_mapper import SecretMapper
from mypass.shared.models.base import utc_now
from mypass.shared.repositories.folder_repository import FolderRepository
from mypass.shared.repositories.secret_repository import SecretRepository
from mypass.shared.schemas.secret import SecretDTO


logger = get_logger("mypass.secrets")


class SecretService:
    """Service for secret business logic."""

    def __init__(self, session: AsyncSession, cache: CacheService) -> None:
        self.session = session
        self.repo = SecretRepository(session)
        self.folder_repo = FolderRepository(session)
        self.cache = cache

    async def save(self, secret_dto: SecretDTO) -> SecretDTO:
        """
        Save a secret, stamping `modified` with the current time.

        Raises:
            FolderNotFoundError: If the target folder does not exist
            SecretNotFoundError: If the DTO carries an id that is not stored
        """
        logger.debug("Request to save Secret", secret_id=secret_dto.id, folder_id=secret_dto.folder_id)

        if not await self.folder_repo.exists(secret_dto.folder_id):
            raise FolderNotFoundError(secret_dto.folder_id)

        secret_dto = secret_dto.model_copy(update={"modified": utc_now()})

        existing = None
        if secret_dto.id is not None:
            existing = await self.repo.get(secret_dto.id)
            if existing is None:
                raise SecretNotFoundError(secret_dto.id)
        previous_folder_id = existing.folder_id if existing is not None else None

        secret = await self.repo.save(SecretMapper.to_entity(secret_dto, existing))

        self.evict(secret.id, secret.folder_id)
        if previous_folder_id is not None and previous_folder_id != secret.folder_id:
            self.evict(secret.id, previous_folder_id)

        return SecretMapper.to_dto(secret)

    async def find_all(self) -> list[SecretDTO]:
        """Get all the secrets."""
        logger.debug("Request to get all Secrets")
        return [SecretMapper.to_dto(secret) for secret in await self.repo.find_all()]

    async def find_one(self, secret_id: int) -> Optional[SecretDTO]:
        """Get one secret by id, or None."""
        logger.debug("Request to get Secret", secret_id=secret_id)

        cached = self.cache.get(SECRET_REGION, secret_id)
        if cached is not None:
            return cached.model_copy(deep=True)

        secret = await self.repo.get(secret_id)
        if secret is None:
            return None

        secret_dto = SecretMapper.to_dto(secret)
        self.cache.put(SECRET_REGION, secret_id, secret_dto.model_copy(deep=True))
        return secret_dto

    async def get_folder_secrets(self, folder_id: int) -> list[SecretDTO]:
        """Get the secrets stored in a folder."""
        logger.debug("Request to get Secrets of Folder", folder_id=folder_id)

        cached = self.cache.get(FOLDER_SECRETS_REGION, folder_id)
        if cached is not None:
            return [secret.model_copy(deep=True) for secret in cached]

        secrets = [SecretMapper.to_dto(secret) for secret in await self.repo.find_by_folder_id(folder_id)]
        self.cache.put(
            FOLDER_SECRETS_REGION,
            folder_id,
            [secret.model_copy(deep=True) for secret in secrets],
        )
        return secrets

    async def delete(self, secret_id: int) -> None:
        """Delete the secret by id; deleting a missing secret is a no-op."""
        logger.debug("Request to delete Secret", secret_id=secret_id)

        secret = await self.repo.get(secret_id)
        if secret is None:
            self.cache.invalidate(SECRET_REGION, secret_id)
            return

        folder_id = secret.folder_id
        await self.repo.delete(secret_id)
        self.evict(secret_id, folder_id)

    def evict(self, secret_id: int, folder_id: int) -> None:
        """Drop the cached secret and the cached views of its folder, now and on commit."""
        self._invalidate(secret_id, folder_id)
        after_commit(self.session, lambda: self._invalidate(secret_id, folder_id))

    def _invalidate(self, secret_id: int, folder_id: int) -> None:
        self.cache.invalidate(SECRET_REGION, secret_id)
        self.cache.invalidate(FOLDER_REGION, folder_id)
        self.cache.invalidate(FOLDER_SECRETS_REGION, folder_id)
