"""
User Handler

Account and user lookups.

ENDPOINTS:
==========
    GET /api/account             → The authenticated user
    GET /api/users               → All users, paged (ROLE_ADMIN)
    GET /api/users/authorities   → Authority names (ROLE_ADMIN)
    GET /api/users/{login}       → One user by login
"""

from fastapi import APIRouter, Depends, Response

from mypass.api.dependencies.auth import AdminUser, CurrentUser
from mypass.api.dependencies.pagination import get_pagination
from mypass.api.dependencies.services import get_user_service
from mypass.shared.core.exceptions import AuthenticationError, UserNotFoundError
from mypass.shared.core.logging import get_logger
from mypass.shared.schemas.common import PaginationParams
from mypass.shared.schemas.user import UserDTO
from mypass.shared.services.user_service import UserService


router = APIRouter()

logger = get_logger("mypass.api.users")


@router.get("/account", response_model=UserDTO)
async def get_account(
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Get the authenticated user.

    Raises:
        401: If the token's user no longer exists
    """
    user = await user_service.get_user_with_authorities(current_user["user_id"])
    if user is None:
        raise AuthenticationError("User could not be found")
    return user


@router.get("/users", response_model=list[UserDTO])
async def get_all_users(
    response: Response,
    admin: AdminUser,
    pagination: PaginationParams = Depends(get_pagination),
    user_service: UserService = Depends(get_user_service),
):
    """
    Get one page of users. The total is returned in X-Total-Count.

    Raises:
        403: If the caller is not an administrator
    """
    logger.debug("REST request to get all Users", page=pagination.page, size=pagination.size)
    users, total = await user_service.get_all_users(offset=pagination.offset, limit=pagination.limit)
    response.headers["X-Total-Count"] = str(total)
    return users


@router.get("/users/authorities", response_model=list[str])
async def get_authorities(
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.get_authorities()


@router.get("/users/{login}", response_model=UserDTO)
async def get_user(
    login: str,
    current_user: CurrentUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Get a user by login.

    Raises:
        404: If no user has this login
    """
    logger.debug("REST request to get User", login=login)
    user = await user_service.get_user_with_authorities_by_login(login)
    if user is None or user.login != login.strip().lower():
        raise UserNotFoundError(login)
    return user
