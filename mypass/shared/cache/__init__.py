"""
Entity Cache

Process-wide cache of transfer objects, partitioned into named regions.

Usage:
======
    from mypass.shared.cache import CacheService, FOLDER_REGION

    cache = CacheService(max_entries=100, ttl_seconds=3600)
    cache.create_default_regions()
    cache.put(FOLDER_REGION, folder.id, folder)
"""

from mypass.shared.cache.cache_service import (
    CacheService,
    USERS_BY_LOGIN_REGION,
    USERS_BY_EMAIL_REGION,
    USER_REGION,
    AUTHORITY_REGION,
    USER_AUTHORITIES_REGION,
    SECRET_REGION,
    FOLDER_REGION,
    FOLDER_SHARED_WITHS_REGION,
    FOLDER_SECRETS_REGION,
    DEFAULT_REGIONS,
)

__all__ = [
    "CacheService",
    "USERS_BY_LOGIN_REGION",
    "USERS_BY_EMAIL_REGION",
    "USER_REGION",
    "AUTHORITY_REGION",
    "USER_AUTHORITIES_REGION",
    "SECRET_REGION",
    "FOLDER_REGION",
    "FOLDER_SHARED_WITHS_REGION",
    "FOLDER_SECRETS_REGION",
    "DEFAULT_REGIONS",
]
