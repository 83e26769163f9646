"""
API schemas for Product endpoints
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class ProductCreate(BaseModel):
    """Complete product representation submitted on create"""
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field("", max_length=2000)
    price: float = Field(..., gt=0)
    sku: str = Field(..., min_length=1, max_length=100)
    inventory: int = Field(0, ge=0)
    categories: List[str] = []

    @field_validator("description", mode="before")
    @classmethod
    def null_description(cls, value):
        return "" if value is None else value

    @field_validator("name", "sku")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("categories")
    @classmethod
    def unique_categories(cls, value: List[str]) -> List[str]:
        # Categories behave as a set; keep first occurrence of each
        return list(dict.fromkeys(value))


class ProductUpdate(ProductCreate):
    """Complete product representation submitted on update (no partial patch)"""
