"""Tests for product request schemas"""
import pytest
from pydantic import ValidationError

from catalog.schemas.product import ProductCreate, ProductUpdate


class TestProductCreate:

    def test_defaults(self):
        product = ProductCreate(name="Widget", price=9.99, sku="W-1")

        assert product.description == ""
        assert product.inventory == 0
        assert product.categories == []

    def test_null_description_becomes_empty(self):
        product = ProductCreate(name="Widget", price=1, sku="W-1", description=None)
        assert product.description == ""

    def test_duplicate_categories_are_collapsed(self):
        product = ProductCreate(name="Widget", price=1, sku="W-1", categories=["a", "b", "a"])
        assert product.categories == ["a", "b"]

    @pytest.mark.parametrize("overrides", [
        {"name": ""},
        {"name": "  "},
        {"sku": " "},
        {"price": 0},
        {"inventory": -1},
        {"name": "x" * 256},
    ])
    def test_invalid_values(self, overrides):
        data = {"name": "Widget", "price": 9.99, "sku": "W-1", **overrides}
        with pytest.raises(ValidationError):
            ProductCreate(**data)

    def test_update_requires_full_representation(self):
        with pytest.raises(ValidationError):
            ProductUpdate(name="Widget v2")
