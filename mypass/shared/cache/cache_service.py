"""
Cache Service

Bounded, time-to-live cache with one region per entity collection.

Regions:
========
    usersByLogin, usersByEmail     ← UserDTO by lower-cased login / email
    User, Authority, User.authorities
    Secret                         ← SecretDTO by id
    Folder                         ← FolderDTO by id
    Folder.sharedWiths, Folder.secrets

Every region is a cachetools TTLCache built from the same configuration:
at most `max_entries` items (least recently used evicted first) and each
item expires `ttl_seconds` after it was written. There is no read-through or
write-through; services populate regions on reads and invalidate them on
writes.

Regions must be created before use, get/put/invalidate on an unknown region
raise CacheRegionNotFoundError.

Usage:
======
    cache = CacheService(max_entries=settings.CACHE_MAX_ENTRIES,
                         ttl_seconds=settings.CACHE_TIME_TO_LIVE_SECONDS)
    cache.create_default_regions()

    cache.put(FOLDER_REGION, 42, folder_dto)
    cache.get(FOLDER_REGION, 42)          # folder_dto, or None once expired
    cache.invalidate(FOLDER_REGION, 42)
"""

import threading
import time
from typing import Any, Callable, Hashable, Optional

from cachetools import TTLCache

from mypass.shared.core.exceptions import CacheRegionNotFoundError
from mypass.shared.core.logging import get_logger


logger = get_logger("mypass.cache")


USERS_BY_LOGIN_REGION = "usersByLogin"
USERS_BY_EMAIL_REGION = "usersByEmail"
USER_REGION = "User"
AUTHORITY_REGION = "Authority"
USER_AUTHORITIES_REGION = "User.authorities"
SECRET_REGION = "Secret"
FOLDER_REGION = "Folder"
FOLDER_SHARED_WITHS_REGION = "Folder.sharedWiths"
FOLDER_SECRETS_REGION = "Folder.secrets"

DEFAULT_REGIONS = (
    USERS_BY_LOGIN_REGION,
    USERS_BY_EMAIL_REGION,
    USER_REGION,
    AUTHORITY_REGION,
    USER_AUTHORITIES_REGION,
    SECRET_REGION,
    FOLDER_REGION,
    FOLDER_SHARED_WITHS_REGION,
    FOLDER_SECRETS_REGION,
)


class CacheService:
    """
    Named-region cache shared by the whole process.

    Built once at application start and handed to services through
    dependency injection.

    Attributes:
        max_entries: Capacity of each region
        ttl_seconds: Lifetime of each entry
    """

    def __init__(
        self,
        max_entries: int,
        ttl_seconds: float,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the cache.

        Args:
            max_entries: Maximum number of entries per region
            ttl_seconds: Seconds before an entry expires
            timer: Clock used for expiry, injectable for tests
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._timer = timer
        self._regions: dict[str, TTLCache] = {}
        # TTLCache is not thread-safe
        self._lock = threading.RLock()

    # ═══════════════════════════════════════════════════════════════════════════
    # REGIONS
    # ═══════════════════════════════════════════════════════════════════════════

    def create_region(self, name: str) -> None:
        """
        Create a region. Creating an existing region leaves it untouched.

        Args:
            name: Region name, e.g. "Folder" or "Folder.sharedWiths"
        """
        with self._lock:
            if name in self._regions:
                return
            self._regions[name] = TTLCache(
                maxsize=self.max_entries,
                ttl=self.ttl_seconds,
                timer=self._timer,
            )
        logger.debug("Cache region created", region=name)

    def create_default_regions(self) -> None:
        """Create every region used by the services."""
        for name in DEFAULT_REGIONS:
            self.create_region(name)

    def region_names(self) -> list[str]:
        """Names of the created regions, in creation order."""
        with self._lock:
            return list(self._regions)

    def _region(self, name: str) -> TTLCache:
        try:
            return self._regions[name]
        except KeyError:
            raise CacheRegionNotFoundError(name) from None

    # ═══════════════════════════════════════════════════════════════════════════
    # ENTRIES
    # ═══════════════════════════════════════════════════════════════════════════

    def get(self, region: str, key: Hashable) -> Optional[Any]:
        """
        Look up an entry.

        Returns:
            The cached value, or None when absent or expired
        """
        with self._lock:
            return self._region(region).get(key)

    def put(self, region: str, key: Hashable, value: Any) -> None:
        """Store an entry, restarting its time-to-live."""
        with self._lock:
            self._region(region)[key] = value

    def invalidate(self, region: str, key: Hashable) -> None:
        """Remove an entry if present."""
        with self._lock:
            self._region(region).pop(key, None)

    def clear(self, region: Optional[str] = None) -> None:
        """
        Empty one region, or every region when none is given.

        Args:
            region: Region to clear
        """
        with self._lock:
            if region is not None:
                self._region(region).clear()
                return
            for cache in self._regions.values():
                cache.clear()

    def size(self, region: str) -> int:
        """Number of live entries in a region."""
        with self._lock:
            cache = self._region(region)
            cache.expire()
            return len(cache)
