"""
Secret mapper.
"""

from typing import Optional

from mypass.shared.models.secret import Secret
from mypass.shared.schemas.secret import SecretDTO


class SecretMapper:
    """Secret ↔ SecretDTO."""

    @staticmethod
    def to_dto(secret: Secret) -> SecretDTO:
        return SecretDTO(
            id=secret.id,
            name=secret.name,
            username=secret.username,
            password=secret.password,
            url=secret.url,
            notes=secret.notes,
            modified=secret.modified,
            folder_id=secret.folder_id,
        )

    @staticmethod
    def to_entity(dto: SecretDTO, existing: Optional[Secret] = None) -> Secret:
        """
        Copy every field of the DTO onto a secret.

        Args:
            dto: Incoming secret
            existing: Persisted secret to overwrite, a new one is built otherwise
                (dto.id is never copied)

        Returns:
            The populated entity (not yet added to a session)
        """
        secret = existing if existing is not None else Secret()
        secret.name = dto.name
        secret.username = dto.username
        secret.password = dto.password
        secret.url = dto.url
        secret.notes = dto.notes
        secret.modified = dto.modified
        secret.folder_id = dto.folder_id
        return secret
