"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: camelCase JSON, snake_case attributes, buildable from ORM objects
- PaginationParams: page/size query parameters (pages are 0-indexed)
- ErrorResponse: shape of every error body
- HealthResponse: health check body

Usage:
======
    from mypass.shared.schemas.common import BaseSchema

    class FolderDTO(BaseSchema):
        owner_login: Optional[str] = None   # serialized as "ownerLogin"

    FolderDTO.model_validate({"ownerLogin": "alice"})   # camelCase accepted
    FolderDTO.model_validate({"owner_login": "alice"})  # snake_case accepted
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    - alias_generator: JSON field names are camelCase
    - populate_by_name: snake_case names are accepted as well
    - from_attributes: allow creating from ORM models
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Pagination query parameters.

    Example:
        GET /api/folders?page=0&size=20
    """

    page: int = Field(default=0, ge=0, description="Page number (0-indexed)")
    size: int = Field(default=20, ge=1, le=100, description="Items per page")

    @property
    def offset(self) -> int:
        """Calculate offset for database query."""
        return self.page * self.size

    @property
    def limit(self) -> int:
        """Get limit for database query."""
        return self.size


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "Folder with id '42' not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "mypass"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
