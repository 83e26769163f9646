"""
Per-client-IP rate limiting

Counters live in the `limits` in-memory storage, which expires each client's
entry once its window elapses, so idle clients do not accumulate state.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from catalog.core.config import config


def create_limiter(limit: str = None) -> Limiter:
    """Build a limiter applying `limit` to every route by client IP"""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[limit or config.rate_limit],
        storage_uri="memory://",
    )


limiter = create_limiter()
