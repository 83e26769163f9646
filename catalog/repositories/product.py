"""
Product repository for data access layer following Repository pattern
"""

import asyncio
import re
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from catalog.core.errors import DeadlineExceeded, InvalidIdentifier, StoreUnavailable
from catalog.core.logger import logger
from catalog.models.product import Product, ProductFilter
from catalog.repositories.i_product_store import IProductStore
from catalog.schemas.product import ProductCreate, ProductUpdate


def _now() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB stores"""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def build_product_query(
    product_filter: ProductFilter,
) -> Tuple[Dict[str, Any], Optional[List[Tuple[str, int]]]]:
    """
    Translate a ProductFilter into a MongoDB query document and sort list.

    Every present dimension is ANDed. Pagination is not part of the query;
    callers apply offset and limit to the cursor.
    """
    query: Dict[str, Any] = {}

    if product_filter.name and product_filter.name.strip():
        query["name"] = {"$regex": re.escape(product_filter.name.strip()), "$options": "i"}

    if product_filter.categories:
        query["categories"] = {"$in": list(product_filter.categories)}

    price_query = {}
    if product_filter.min_price > 0:
        price_query["$gte"] = product_filter.min_price
    if product_filter.max_price > 0:
        price_query["$lte"] = product_filter.max_price
    if price_query:
        query["price"] = price_query

    sort = None
    if product_filter.sort_by:
        direction = DESCENDING if product_filter.sort_order == "desc" else ASCENDING
        sort = [(product_filter.sort_by, direction)]

    return query, sort


class ProductRepository(IProductStore):
    """MongoDB-backed product store"""

    def __init__(self, collection: AsyncIOMotorCollection, timeout: float = 10.0):
        self.collection = collection
        self.timeout = timeout

    @staticmethod
    def _to_object_id(product_id: str) -> ObjectId:
        if not isinstance(product_id, str) or not ObjectId.is_valid(product_id):
            raise InvalidIdentifier(product_id)
        return ObjectId(product_id)

    def canonical_id(self, product_id: str) -> str:
        return str(self._to_object_id(product_id))

    @staticmethod
    def _doc_to_product(doc: dict) -> Product:
        """Convert MongoDB document to Product model"""
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        # Older writers stored empty values as null
        doc["categories"] = doc.get("categories") or []
        doc["description"] = doc.get("description") or ""
        return Product(**doc)

    @asynccontextmanager
    async def _operation(self, operation: str, product_id: str = None):
        """Apply the store deadline and map driver failures to service errors"""
        try:
            async with asyncio.timeout(self.timeout):
                yield
        except TimeoutError as e:
            logger.error(
                f"MongoDB {operation} exceeded deadline",
                metadata={"event": f"{operation}_deadline_exceeded", "product_id": product_id,
                          "timeout_seconds": self.timeout},
                error=e,
            )
            raise DeadlineExceeded(f"Database deadline exceeded during {operation}")
        except PyMongoError as e:
            logger.error(
                f"MongoDB error during {operation}",
                metadata={"event": f"{operation}_failed", "product_id": product_id},
                error=e,
            )
            raise StoreUnavailable(f"Database error during {operation}")

    async def find_all(self, product_filter: ProductFilter) -> List[Product]:
        """List products matching the filter with pagination"""
        query, sort = build_product_query(product_filter)

        async with self._operation("list_products"):
            cursor = self.collection.find(query)
            if sort:
                cursor = cursor.sort(sort)
            cursor = cursor.skip(product_filter.offset).limit(product_filter.limit)
            docs = await cursor.to_list(length=None)

        return [self._doc_to_product(doc) for doc in docs]

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID"""
        obj_id = self._to_object_id(product_id)

        async with self._operation("get_product", product_id):
            doc = await self.collection.find_one({"_id": obj_id})

        return self._doc_to_product(doc) if doc else None

    async def create(self, product_data: ProductCreate) -> Product:
        """Create a new product"""
        now = _now()
        doc = product_data.model_dump()
        doc.update({"created_at": now, "updated_at": now})

        async with self._operation("create_product"):
            result = await self.collection.insert_one(doc)

        doc["_id"] = result.inserted_id
        return self._doc_to_product(doc)

    async def update(self, product_id: str, product_data: ProductUpdate) -> Optional[Product]:
        """
        Overwrite the product's fields with the submitted representation.

        The identifier and created_at are never touched. updated_at moves to
        the current time, or one millisecond past its stored value if the
        clock has not advanced, so it strictly increases on every update.
        """
        obj_id = self._to_object_id(product_id)

        # $literal keeps string values starting with "$" from being read as field paths
        fields = {key: {"$literal": value} for key, value in product_data.model_dump().items()}
        fields["updated_at"] = {"$max": [_now(), {"$add": ["$updated_at", 1]}]}

        async with self._operation("update_product", product_id):
            doc = await self.collection.find_one_and_update(
                {"_id": obj_id},
                [{"$set": fields}],
                return_document=ReturnDocument.AFTER,
            )

        return self._doc_to_product(doc) if doc else None

    async def delete(self, product_id: str) -> bool:
        """Hard delete a product"""
        obj_id = self._to_object_id(product_id)

        async with self._operation("delete_product", product_id):
            result = await self.collection.delete_one({"_id": obj_id})

        return result.deleted_count > 0
