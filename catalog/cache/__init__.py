"""
Cache module initialization
"""

from .i_cache import ICache
from .redis_cache import RedisCache

__all__ = ["ICache", "RedisCache"]
