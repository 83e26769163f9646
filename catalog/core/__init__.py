"""
Core module initialization
"""

from .config import config
from .errors import (
    ErrorResponse,
    ErrorResponseModel,
    ValidationError,
    InvalidIdentifier,
    Unauthorized,
    NotFound,
    RateLimited,
    StoreUnavailable,
    DeadlineExceeded,
    CacheUnavailable,
    PublishUnavailable,
)
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "ValidationError",
    "InvalidIdentifier",
    "Unauthorized",
    "NotFound",
    "RateLimited",
    "StoreUnavailable",
    "DeadlineExceeded",
    "CacheUnavailable",
    "PublishUnavailable",
    "logger",
]
