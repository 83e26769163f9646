"""
Repositories module initialization
"""

from .i_product_store import IProductStore
from .product import ProductRepository, build_product_query

__all__ = [
    "IProductStore",
    "ProductRepository",
    "build_product_query",
]
