"""
Authentication Handler

Handles account registration and token issuance.

ARCHITECTURE:
=============
    Handler → AuthService → Repository → Model
          ↘ SecurityUtils ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Duplicate registrations (409) and bad credentials (401) are raised by the
service as MyPassException subclasses and rendered by the global handler.
"""

from fastapi import APIRouter, Depends, status

from mypass.api.dependencies.services import get_auth_service
from mypass.shared.core.logging import get_logger
from mypass.shared.schemas.user import AuthResponse, LoginRequest, RegisterRequest
from mypass.shared.services.auth_service import AuthService


router = APIRouter()

logger = get_logger("mypass.api.auth")


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new account.

    Args:
        user_data: Login, email, password and optional names
        auth_service: Injected AuthService instance

    Returns:
        AuthResponse with the new user and an access token

    Raises:
        409: If the login or email is already registered
    """
    logger.debug("REST request to register account", login=user_data.login)
    user, access_token, expires_in = await auth_service.register_user(
        login=user_data.login,
        email=user_data.email,
        password=user_data.password,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
    )

    return AuthResponse(
        user=user,
        access_token=access_token,
        expires_in=expires_in,
    )


@router.post("/authenticate", response_model=AuthResponse)
async def authenticate(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with a login (or email) and password.

    Raises:
        401: If credentials are invalid or the account is not activated
    """
    user, access_token, expires_in = await auth_service.login_user(
        username=credentials.username,
        password=credentials.password,
    )

    return AuthResponse(
        user=user,
        access_token=access_token,
        expires_in=expires_in,
    )
