"""
Authentication Dependencies

FastAPI dependencies for bearer-token authentication and role checks.

Dependency Hierarchy:
=====================
    get_current_user_token()   ← Extract and validate JWT from header
           │
           ▼
    get_current_user()         ← Claims as a dict (user_id, login, email, authorities)
           │
           ▼
    require_authority(role)    ← 403 unless the user holds the role

Type Aliases:
=============
    CurrentUser - Authenticated user claims
    AdminUser   - Authenticated user holding ROLE_ADMIN

Usage:
======
    from mypass.api.dependencies.auth import CurrentUser

    @router.get("/account")
    async def get_account(current_user: CurrentUser):
        return current_user["login"]
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from mypass.config.settings import settings
from mypass.shared.core.exceptions import AuthenticationError, AuthorizationError
from mypass.shared.core.logging import clear_log_context, log_context
from mypass.shared.models.authority import ROLE_ADMIN
from mypass.shared.utils.security import SecurityUtils


# auto_error=False so a missing header is reported as 401 by our own handler
security = HTTPBearer(auto_error=False)


async def get_current_user_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> dict:
    """
    Extract and validate JWT token from Authorization header.

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is missing or invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_current_user(
    token: Annotated[dict, Depends(get_current_user_token)],
) -> dict:
    """
    Get current authenticated user from token.

    Returns:
        Dict with user_id, login, email and authorities

    Raises:
        AuthenticationError: If the token lacks a user id or login
    """
    user_id = token.get("user_id")
    login = token.get("login")

    if not user_id or not login:
        raise AuthenticationError("Invalid token payload")

    clear_log_context()
    log_context(user_id=user_id, login=login)

    return {
        "user_id": user_id,
        "login": login,
        "email": token.get("email"),
        "authorities": list(token.get("auth") or []),
    }


def require_authority(authority: str):
    """
    Build a dependency that only lets through users holding `authority`.

    Example:
        @router.get("/users", dependencies=[Depends(require_authority(ROLE_ADMIN))])
    """

    async def check_authority(
        current_user: Annotated[dict, Depends(get_current_user)],
    ) -> dict:
        if authority not in current_user["authorities"]:
            raise AuthorizationError(f"{authority} required")
        return current_user

    return check_authority


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[dict, Depends(get_current_user)]

AdminUser = Annotated[dict, Depends(require_authority(ROLE_ADMIN))]
