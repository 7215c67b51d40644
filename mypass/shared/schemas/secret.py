"""
Secret Schemas

Transfer object for secrets.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from mypass.shared.schemas.common import BaseSchema


class SecretDTO(BaseSchema):
    """
    A secret and the folder it belongs to.

    JSON:
        {"id": 7, "name": "Bank portal", "username": "alice.l", "password": "...",
         "url": "https://bank.example.com", "notes": null,
         "modified": "2024-01-15T10:30:00Z", "folderId": 42}
    """

    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=100)
    username: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = None
    url: Optional[str] = Field(default=None, max_length=2048)
    notes: Optional[str] = None
    modified: Optional[datetime] = None
    folder_id: int
