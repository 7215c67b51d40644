"""
User Schemas

Request/response models for users, accounts and authentication.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from mypass.shared.schemas.common import BaseSchema


class UserDTO(BaseSchema):
    """
    User as exposed by the API and embedded in FolderDTO.sharedWiths.

    Only `id` matters when a client sends users back inside a folder.
    """

    id: Optional[int] = None
    login: str = Field(min_length=1, max_length=50)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    activated: bool = True
    authorities: list[str] = Field(default_factory=list)


class RegisterRequest(BaseSchema):
    """Schema for account registration."""

    login: str = Field(
        min_length=1,
        max_length=50,
        pattern=r"^[_.@A-Za-z0-9-]*$",
        description="Login (letters, digits and _ . @ -)",
    )
    email: EmailStr
    password: str = Field(
        min_length=4,
        max_length=100,
        description="Password (4 to 100 characters)",
    )
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)


class LoginRequest(BaseSchema):
    """Schema for authentication, `username` may be a login or an email."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AuthResponse(BaseSchema):
    """Schema for authentication response."""

    user: UserDTO
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    user_id: int
    login: str
    email: Optional[str] = None
    auth: list[str] = Field(default_factory=list)
