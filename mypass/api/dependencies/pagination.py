"""
Pagination dependency.
"""
from typing import Optional

from fastapi import Query

from mypass.shared.schemas.common import PaginationParams


async def get_pagination(
    page: int = Query(0, ge=0, description="Page number (0-indexed)"),
    size: int = Query(20, ge=1, le=100, description="Items per page"),
) -> PaginationParams:
    """Pagination parameters dependency."""
    return PaginationParams(page=page, size=size)


async def get_optional_pagination(
    page: Optional[int] = Query(None, ge=0, description="Page number (0-indexed)"),
    size: Optional[int] = Query(None, ge=1, le=100, description="Items per page"),
) -> Optional[PaginationParams]:
    """Pagination parameters, or None when the client asked for everything."""
    if page is None and size is None:
        return None
    return PaginationParams(page=page or 0, size=size or 20)
