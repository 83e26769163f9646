"""
Models module initialization
"""

from .product import Product, ProductFilter, ProductEvent
from .user import User

__all__ = [
    "Product",
    "ProductFilter",
    "ProductEvent",
    "User",
]
