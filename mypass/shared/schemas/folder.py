"""
Folder Schemas

Transfer object for folders, including the users a folder is shared with.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mypass.shared.schemas.common import BaseSchema
from mypass.shared.schemas.secret import SecretDTO
from mypass.shared.schemas.user import UserDTO


class FolderDTO(BaseSchema):
    """
    Folder with its owner, secrets and sharedWiths.

    JSON:
        {"id": 42, "name": "Finance", "ownerId": 1001, "ownerLogin": "alice",
         "modified": "2024-01-15T10:30:00Z", "secrets": [...], "sharedWiths": [...]}

    sharedWiths behaves as a set keyed by user id: add_shared_with() never
    inserts the same user twice.
    """

    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=100)
    owner_id: Optional[int] = None
    owner_login: Optional[str] = None
    modified: Optional[datetime] = None
    secrets: list[SecretDTO] = Field(default_factory=list)
    shared_withs: list[UserDTO] = Field(default_factory=list)

    @property
    def shared_with_ids(self) -> set[int]:
        """Ids of the users the folder is shared with."""
        return {user.id for user in self.shared_withs if user.id is not None}

    def add_shared_with(self, user: UserDTO) -> bool:
        """
        Share the folder with a user.

        Args:
            user: User to add, must have an id

        Returns:
            True if the user was added, False if already present
        """
        if user.id is None:
            raise ValueError("Cannot share a folder with a user that has no id")
        if user.id in self.shared_with_ids:
            return False
        self.shared_withs.append(user)
        return True
