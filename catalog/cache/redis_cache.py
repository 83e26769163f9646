"""
Redis cache adapter
Thin async wrapper over redis-py that maps client failures to CacheUnavailable
"""

from typing import Optional
from redis.asyncio import Redis, from_url
from redis.exceptions import RedisError

from catalog.cache.i_cache import ICache
from catalog.core.errors import CacheUnavailable
from catalog.core.logger import logger


class RedisCache(ICache):
    """Redis implementation of ICache; expiry is left to Redis' native TTL"""

    def __init__(self, redis_url: str, timeout: float = 2.0, client: Optional[Redis] = None):
        self.redis_url = redis_url
        self.timeout = timeout
        self._redis: Optional[Redis] = client

    async def connect(self) -> None:
        """Initializes the Redis connection pool and verifies it"""
        if self._redis is None:
            logger.info("Connecting to Redis...", metadata={"event": "redis_connecting"})
            self._redis = from_url(
                self.redis_url,
                decode_responses=True,
                socket_timeout=self.timeout,
                socket_connect_timeout=self.timeout,
            )
        await self._redis.ping()
        logger.info("Successfully connected to Redis", metadata={"event": "redis_connected"})

    async def close(self) -> None:
        """Closes the connection pool"""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None

    def _client(self) -> Redis:
        if self._redis is None:
            raise CacheUnavailable("Redis is not connected")
        return self._redis

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self._client().get(key)
        except (RedisError, OSError) as e:
            raise CacheUnavailable(f"Cache get failed: {e}", details={"key": key})

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        try:
            await self._client().set(key, value, ex=ttl_seconds)
        except (RedisError, OSError) as e:
            raise CacheUnavailable(f"Cache set failed: {e}", details={"key": key})

    async def delete(self, key: str) -> None:
        try:
            await self._client().delete(key)
        except (RedisError, OSError) as e:
            raise CacheUnavailable(f"Cache delete failed: {e}", details={"key": key})

    async def is_healthy(self) -> bool:
        """Check whether Redis answers a ping"""
        try:
            return bool(await self._client().ping())
        except (CacheUnavailable, RedisError, OSError):
            return False
