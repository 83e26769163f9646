"""
Cache Interface
Key/value string cache with per-entry expiry
"""

from abc import ABC, abstractmethod
from typing import Optional


class ICache(ABC):
    """Abstract base class for cache implementations"""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Get a cached value

        Returns:
            The stored string, or None on a miss

        Raises:
            CacheUnavailable: if the cache cannot be reached
        """

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value that expires after ttl_seconds"""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a value; removing a missing key is not an error"""
