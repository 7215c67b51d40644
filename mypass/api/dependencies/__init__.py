"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), require_authority(), CurrentUser, AdminUser
- Services: get_cache(), get_*_service() functions
- Pagination: get_pagination(), get_optional_pagination()

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: dict = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user: CurrentUser):
"""

from mypass.api.dependencies.database import (
    get_db,
    DbSession,
)
from mypass.api.dependencies.auth import (
    get_current_user,
    get_current_user_token,
    require_authority,
    CurrentUser,
    AdminUser,
)
from mypass.api.dependencies.services import (
    get_cache,
    get_auth_service,
    get_user_service,
    get_folder_service,
    get_secret_service,
)
from mypass.api.dependencies.pagination import (
    get_pagination,
    get_optional_pagination,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_user",
    "get_current_user_token",
    "require_authority",
    "CurrentUser",
    "AdminUser",
    # Services
    "get_cache",
    "get_auth_service",
    "get_user_service",
    "get_folder_service",
    "get_secret_service",
    # Pagination
    "get_pagination",
    "get_optional_pagination",
]
