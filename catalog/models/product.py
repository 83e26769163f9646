"""
Product domain models
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class Product(BaseModel):
    """A catalog product as stored and returned by the service"""

    id: str
    name: str
    description: str = ""
    price: float
    sku: str
    inventory: int = 0
    categories: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ProductFilter(BaseModel):
    """
    Listing criteria. Unset or zero values place no constraint on their
    dimension; limit and offset always apply.
    """

    name: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    min_price: float = 0
    max_price: float = 0
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None
    limit: int = 10
    offset: int = 0


class ProductEvent(BaseModel):
    """Payload published to the product exchange"""

    id: str
    product: Optional[Product] = None
    timestamp: datetime
