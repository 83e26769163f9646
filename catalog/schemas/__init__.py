"""
Schemas module initialization
"""

from .product import ProductCreate, ProductUpdate

__all__ = [
    "ProductCreate",
    "ProductUpdate",
]
