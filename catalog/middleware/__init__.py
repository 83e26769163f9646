"""
Middleware modules for the Product Catalog Service
"""

from .rate_limit import create_limiter, limiter
from .request_id import RequestIdMiddleware
from .request_logging import RequestLoggingMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "create_limiter",
    "limiter",
    "RequestIdMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
]
