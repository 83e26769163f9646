"""
Product API endpoints
Every route requires a valid bearer token
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from catalog.core.errors import ErrorResponseModel, NotFound, ValidationError
from catalog.dependencies.auth import get_current_user
from catalog.dependencies.product import get_product_service
from catalog.models.product import Product, ProductFilter
from catalog.schemas.product import ProductCreate, ProductUpdate
from catalog.services.product import ProductService

router = APIRouter(
    dependencies=[Depends(get_current_user)],
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        429: {"model": ErrorResponseModel},
        500: {"model": ErrorResponseModel},
    },
)


@router.get("", response_model=List[Product])
async def list_products(
    name: Optional[str] = Query(None, description="Case-insensitive partial name match"),
    categories: List[str] = Query([], description="Match products in any of these categories"),
    min_price: float = Query(0, ge=0, description="Minimum price (inclusive)"),
    max_price: float = Query(0, ge=0, description="Maximum price (inclusive)"),
    sort_by: Optional[str] = Query(None, pattern=r"^[A-Za-z_][A-Za-z0-9_]*$", description="Field to sort by"),
    sort_order: Optional[str] = Query(None, description="'desc' for descending, ascending otherwise"),
    limit: int = Query(10, ge=1, le=1000, description="Number of records to return"),
    offset: int = Query(0, ge=0, description="Number of records to skip"),
    service: ProductService = Depends(get_product_service),
):
    """List products with optional filters, sorting and pagination"""
    if min_price > 0 and max_price > 0 and min_price > max_price:
        raise ValidationError(
            "min_price must not exceed max_price",
            details={"min_price": min_price, "max_price": max_price},
        )

    product_filter = ProductFilter(
        name=name,
        categories=categories,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=limit,
        offset=offset,
    )
    return await service.list_products(product_filter)


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    """Get a product by ID"""
    product = await service.get_product(product_id)
    if product is None:
        raise NotFound("Product not found", details={"product_id": product_id})
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    """Create a new product"""
    return await service.create_product(product)


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={404: {"model": ErrorResponseModel}},
)
async def update_product(
    product_id: str,
    product: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    """Replace an existing product with the submitted representation"""
    updated = await service.update_product(product_id, product)
    if updated is None:
        raise NotFound("Product not found", details={"product_id": product_id})
    return updated


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponseModel}},
)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
):
    """Delete a product"""
    if not await service.delete_product(product_id):
        raise NotFound("Product not found", details={"product_id": product_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
