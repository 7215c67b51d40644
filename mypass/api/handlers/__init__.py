"""
API Handlers

Route handlers for the MyPass API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses (alert headers included)

All business logic is delegated to the service layer.
"""

from mypass.api.handlers import (
    auth_handler,
    folder_handler,
    health_handler,
    secret_handler,
    user_handler,
)

__all__ = [
    "auth_handler",
    "folder_handler",
    "health_handler",
    "secret_handler",
    "user_handler",
]
