"""
Dependencies module initialization
"""

from .auth import get_current_user
from .product import get_product_service

__all__ = [
    "get_current_user",
    "get_product_service",
]
