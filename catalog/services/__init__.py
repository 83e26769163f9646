"""
Services module initialization
"""

from .product import ProductService, PRODUCT_CREATED, PRODUCT_UPDATED, PRODUCT_DELETED

__all__ = [
    "ProductService",
    "PRODUCT_CREATED",
    "PRODUCT_UPDATED",
    "PRODUCT_DELETED",
]
