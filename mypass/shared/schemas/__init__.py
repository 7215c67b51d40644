"""
Pydantic Schemas

Transfer objects (DTOs) and request/response models for the API.

Schema Categories:
==================
- common: Base schema, pagination, error and health responses
- user: UserDTO, registration, authentication
- folder: FolderDTO
- secret: SecretDTO

Usage:
======
    from mypass.shared.schemas.folder import FolderDTO
    from mypass.shared.schemas.user import UserDTO, AuthResponse
"""

from mypass.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from mypass.shared.schemas.user import (
    UserDTO,
    RegisterRequest,
    LoginRequest,
    AuthResponse,
    TokenPayload,
)
from mypass.shared.schemas.secret import SecretDTO
from mypass.shared.schemas.folder import FolderDTO

__all__ = [
    # Common
    "BaseSchema",
    "PaginationParams",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "UserDTO",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "TokenPayload",
    # Secret
    "SecretDTO",
    # Folder
    "FolderDTO",
]
