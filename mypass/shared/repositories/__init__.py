"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Lookup by login / email
         ├── AuthorityRepository        ← Roles, created on first use
         ├── FolderRepository           ← Eager-loaded folders, access query, search
         └── SecretRepository           ← Secrets by folder

Usage Example:
==============
    from mypass.shared.repositories import FolderRepository

    async def folders_for(db: AsyncSession, login: str):
        return await FolderRepository(db).find_by_user_has_access(login)
"""

from mypass.shared.repositories.base import BaseRepository
from mypass.shared.repositories.user_repository import UserRepository
from mypass.shared.repositories.authority_repository import AuthorityRepository
from mypass.shared.repositories.folder_repository import FolderRepository
from mypass.shared.repositories.secret_repository import SecretRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "AuthorityRepository",
    "FolderRepository",
    "SecretRepository",
]
