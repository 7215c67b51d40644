"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
the entity cache, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ CacheService

Services should:
- Contain business logic and validation
- Keep the cache consistent with what they write
- Work inside the request's transaction (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration and authentication
- UserService: User lookups by id, login or email
- FolderService: Folder CRUD, sharing support, access queries
- SecretService: Secret CRUD

Usage:
======
    from mypass.shared.services import FolderService

    service = FolderService(db, cache)
    folders = await service.get_current_user_folders("alice")
"""

from mypass.shared.services.auth_service import AuthService
from mypass.shared.services.user_service import UserService
from mypass.shared.services.folder_service import FolderService
from mypass.shared.services.secret_service import SecretService

__all__ = [
    "AuthService",
    "UserService",
    "FolderService",
    "SecretService",
]
