"""
Product Store Interface
Defines the contract the service layer needs from the document store.
Every operation must succeed or raise; failures propagate to the caller.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from catalog.models.product import Product, ProductFilter
from catalog.schemas.product import ProductCreate, ProductUpdate


class IProductStore(ABC):
    """Abstract base class for product persistence"""

    @abstractmethod
    async def find_all(self, product_filter: ProductFilter) -> List[Product]:
        """
        Return the products matching every constraint in the filter

        Raises:
            StoreUnavailable: if the query cannot be executed
        """

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Return the product with this identifier, or None when absent

        Raises:
            InvalidIdentifier: if the identifier is malformed
            StoreUnavailable: if the store cannot be reached
        """

    @abstractmethod
    async def create(self, product_data: ProductCreate) -> Product:
        """Insert a product, assigning its identifier and timestamps"""

    @abstractmethod
    async def update(self, product_id: str, product_data: ProductUpdate) -> Optional[Product]:
        """
        Overwrite the stored product with the submitted representation

        Returns:
            The product after update, or None if no product has this identifier
        """

    @abstractmethod
    async def delete(self, product_id: str) -> bool:
        """
        Remove a product

        Returns:
            True if a product was deleted, False if none had this identifier
        """

    @abstractmethod
    def canonical_id(self, product_id: str) -> str:
        """
        Return the single spelling of an identifier that the store treats as
        equal to `product_id`, so callers can key other resources by it

        Raises:
            InvalidIdentifier: if the identifier is malformed
        """
