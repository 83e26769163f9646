"""
Dependency injection for the Product service
"""

from fastapi import Request

from catalog.services.product import ProductService


def get_product_service(request: Request) -> ProductService:
    """Get the product service built during application start-up"""
    return request.app.state.product_service
