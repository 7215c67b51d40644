"""
Folder mapper.

The folder's secrets are owned by the Secret side of the relation, so
to_entity() ignores FolderDTO.secrets; they change through SecretService.
"""

from typing import Optional

from mypass.shared.mappers.secret_mapper import SecretMapper
from mypass.shared.mappers.user_mapper import UserMapper
from mypass.shared.models.folder import Folder
from mypass.shared.models.user import User
from mypass.shared.schemas.folder import FolderDTO


class FolderMapper:
    """Folder ↔ FolderDTO."""

    @staticmethod
    def to_dto(folder: Folder, include_secrets: bool = True) -> FolderDTO:
        """
        Map a folder.

        Args:
            folder: Folder with owner and shared_withs loaded (and secrets,
                when include_secrets is set)
            include_secrets: Leave `secrets` empty when False

        Returns:
            FolderDTO
        """
        secrets = []
        if include_secrets:
            secrets = [
                SecretMapper.to_dto(secret)
                for secret in sorted(folder.secrets, key=lambda s: s.id)
            ]

        return FolderDTO(
            id=folder.id,
            name=folder.name,
            owner_id=folder.owner_id,
            owner_login=folder.owner_login,
            modified=folder.modified,
            secrets=secrets,
            shared_withs=UserMapper.to_dtos(folder.shared_withs),
        )

    @staticmethod
    def to_entity(
        dto: FolderDTO,
        shared_withs: list[User],
        existing: Optional[Folder] = None,
    ) -> Folder:
        """
        Build or overwrite a folder from a DTO (full replacement, no patching).

        Args:
            dto: Incoming folder
            shared_withs: Users resolved from dto.shared_withs
            existing: Persisted folder to overwrite, a new one is built otherwise
                (dto.id is never copied, a new folder gets its id from the database)

        Returns:
            The populated entity
        """
        folder = existing if existing is not None else Folder()
        folder.name = dto.name
        folder.owner_id = dto.owner_id
        folder.modified = dto.modified
        folder.shared_withs = list(shared_withs)
        return folder
