"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from mypass.shared.core.logging import logger, get_logger
    from mypass.shared.core.exceptions import MyPassException, NotFoundError

    logger.info("Starting operation", folder_id=folder_id)
"""

from mypass.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from mypass.shared.core.exceptions import (
    MyPassException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    FolderNotFoundError,
    SecretNotFoundError,
    ValidationError,
    BadRequestAlertError,
    ConflictError,
    DuplicateResourceError,
    CacheRegionNotFoundError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "MyPassException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "FolderNotFoundError",
    "SecretNotFoundError",
    "ValidationError",
    "BadRequestAlertError",
    "ConflictError",
    "DuplicateResourceError",
    "CacheRegionNotFoundError",
]
