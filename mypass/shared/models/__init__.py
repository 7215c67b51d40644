"""
MyPass SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── authorities (Authority[])      via user_authority
       ├── owned_folders (Folder[])
       └── shared_folders (Folder[])      via folder_shared_with

    Folder
       ├── owner (User)
       ├── secrets (Secret[])
       └── shared_withs (User[])          via folder_shared_with

Usage:
======
    from mypass.shared.models import Folder, Secret, User

    folder.shared_withs   # Users the folder is shared with (load explicitly)
    user.authorities      # Always loaded with the user
"""

from mypass.shared.models.base import Base, BigIntPK, TimestampMixin, utc_now
from mypass.shared.models.authority import (
    Authority,
    user_authority,
    ROLE_USER,
    ROLE_ADMIN,
)
from mypass.shared.models.user import User
from mypass.shared.models.folder import Folder, folder_shared_with
from mypass.shared.models.secret import Secret

__all__ = [
    # Base classes and helpers
    "Base",
    "BigIntPK",
    "TimestampMixin",
    "utc_now",
    # Authorities
    "Authority",
    "user_authority",
    "ROLE_USER",
    "ROLE_ADMIN",
    # Core models
    "User",
    "Folder",
    "folder_shared_with",
    "Secret",
]
