"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    MyPassException (base, 500)
       │
       ├── AuthenticationError (401)      ← Invalid credentials, token expired
       ├── AuthorizationError (403)       ← Missing authority (e.g. ROLE_ADMIN)
       ├── NotFoundError (404)            ← Resource not found
       │      ├── UserNotFoundError
       │      ├── FolderNotFoundError
       │      └── SecretNotFoundError
       ├── ValidationError (400)          ← Invalid input data
       │      └── BadRequestAlertError    ← Rejected REST request (idexists, idnull, notowner)
       ├── ConflictError (409)
       │      └── DuplicateResourceError  ← Login or email already registered
       └── CacheRegionNotFoundError (500) ← Cache region used before being created

Usage:
======
    from mypass.shared.core.exceptions import FolderNotFoundError, BadRequestAlertError

    raise FolderNotFoundError(folder_id)
    # {"error": {"code": "NOT_FOUND", "message": "Folder with id '42' not found", ...}}

    raise BadRequestAlertError("A new folder cannot already have an ID", "folder", "idexists")

Exception Handling:
===================
    Exceptions are converted to JSON by the API error handler:
    {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid id",
            "details": {"entityName": "folder", "errorKey": "idnull"}
        }
    }

Sharing a folder you do not own is reported as a BadRequestAlertError (400),
not an AuthorizationError.
"""

from typing import Any, Optional


class MyPassException(Exception):
    """
    Base exception for all MyPass application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(MyPassException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Missing or invalid bearer token
    - Token expired or malformed
    - Wrong login/password, or account not activated
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class AuthorizationError(MyPassException):
    """Authenticated, but lacking the required authority (403 Forbidden)."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(MyPassException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Folder", 42)
        # Message: "Folder with id '42' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found, by id, login or email."""

    def __init__(self, user_ref: Any) -> None:
        super().__init__(resource="User", resource_id=user_ref)


class FolderNotFoundError(NotFoundError):
    """Folder not found error."""

    def __init__(self, folder_id: Any) -> None:
        super().__init__(resource="Folder", resource_id=folder_id)


class SecretNotFoundError(NotFoundError):
    """Secret not found error."""

    def __init__(self, secret_id: Any) -> None:
        super().__init__(resource="Secret", resource_id=secret_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(MyPassException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class BadRequestAlertError(ValidationError):
    """
    Rejected REST request on an entity.

    Carries the entity name and a short error key so clients can pick a
    translated message, e.g. ("folder", "idexists").
    """

    def __init__(self, message: str, entity_name: str, error_key: str) -> None:
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(
            message=message,
            details={"entityName": entity_name, "errorKey": error_key},
        )


class ConflictError(MyPassException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Login or email already in use."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# INTERNAL ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class CacheRegionNotFoundError(MyPassException):
    """A cache region was read or written before create_region() was called."""

    def __init__(self, region: str) -> None:
        self.region = region
        super().__init__(
            message=f"Cache region '{region}' has not been created",
            status_code=500,
            error_code="CACHE_REGION_NOT_FOUND",
            details={"region": region},
        )
