"""
Product service containing the read/write orchestration path.

Reads go through the cache; writes go to the store first and, once the
store confirms, invalidate the cache and emit a domain event. The store is
the source of truth: its failures propagate, while cache and broker
failures are logged and absorbed. Cache keys use the store's canonical
spelling of an identifier, so every spelling of one product shares an entry.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError as ModelValidationError

from catalog.cache.i_cache import ICache
from catalog.core.errors import CacheUnavailable
from catalog.core.logger import logger
from catalog.messaging.notifier import EventNotifier
from catalog.models.product import Product, ProductEvent, ProductFilter
from catalog.repositories.i_product_store import IProductStore
from catalog.schemas.product import ProductCreate, ProductUpdate

PRODUCT_CREATED = "product.created"
PRODUCT_UPDATED = "product.updated"
PRODUCT_DELETED = "product.deleted"

DEFAULT_CACHE_TTL = 30 * 60  # seconds


def cache_key(product_id: str) -> str:
    return f"product:{product_id}"


class ProductService:
    """Service layer for product business logic"""

    def __init__(
        self,
        store: IProductStore,
        cache: ICache,
        notifier: EventNotifier,
        cache_ttl: int = DEFAULT_CACHE_TTL,
    ):
        self.store = store
        self.cache = cache
        self.notifier = notifier
        self.cache_ttl = cache_ttl

    async def list_products(self, product_filter: ProductFilter) -> List[Product]:
        """List products matching the filter; results are never cached"""
        products = await self.store.find_all(product_filter)

        logger.info(
            f"Fetched {len(products)} products",
            metadata={"event": "list_products", "count": len(products),
                      "filter": product_filter.model_dump(exclude_defaults=True)},
        )
        return products

    async def get_product(self, product_id: str) -> Optional[Product]:
        """Get product by ID, reading through the cache"""
        product_id = self.store.canonical_id(product_id)
        key = cache_key(product_id)

        cached = await self._cache_get(key)
        if cached is not None:
            try:
                product = Product.model_validate_json(cached)
            except ModelValidationError:
                # Undecodable entries are treated as a miss
                logger.warning(
                    "Discarding undecodable cache entry",
                    metadata={"event": "cache_decode_failed", "product_id": product_id},
                )
            else:
                logger.debug("Cache hit", metadata={"event": "cache_hit", "product_id": product_id})
                return product

        product = await self.store.find_by_id(product_id)
        if product is None:
            return None

        await self._cache_set(key, product.model_dump_json())

        logger.info(
            f"Fetched product {product_id}",
            metadata={"event": "get_product", "product_id": product_id},
        )
        return product

    async def create_product(self, product_data: ProductCreate) -> Product:
        """Create a product and announce it"""
        product = await self.store.create(product_data)

        logger.info(
            f"Created product {product.id}",
            metadata={"event": "create_product", "product_id": product.id},
        )

        await self.notifier.notify(
            PRODUCT_CREATED,
            ProductEvent(id=product.id, product=product, timestamp=_utcnow()),
        )
        return product

    async def update_product(self, product_id: str, product_data: ProductUpdate) -> Optional[Product]:
        """Replace a product's fields; None when the product does not exist"""
        product_id = self.store.canonical_id(product_id)
        product = await self.store.update(product_id, product_data)
        if product is None:
            return None

        logger.info(
            f"Updated product {product_id}",
            metadata={"event": "update_product", "product_id": product_id},
        )

        await self._invalidate(product_id)
        await self.notifier.notify(
            PRODUCT_UPDATED,
            ProductEvent(id=product.id, product=product, timestamp=_utcnow()),
        )
        return product

    async def delete_product(self, product_id: str) -> bool:
        """Delete a product; False when the product does not exist"""
        product_id = self.store.canonical_id(product_id)
        deleted = await self.store.delete(product_id)
        if not deleted:
            return False

        logger.info(
            f"Deleted product {product_id}",
            metadata={"event": "delete_product", "product_id": product_id},
        )

        await self._invalidate(product_id)
        await self.notifier.notify(
            PRODUCT_DELETED,
            ProductEvent(id=product_id, timestamp=_utcnow()),
        )
        return True

    async def _cache_get(self, key: str) -> Optional[str]:
        try:
            return await self.cache.get(key)
        except CacheUnavailable as e:
            logger.warning("Cache read failed", metadata={"event": "cache_get_failed", "key": key}, error=e)
            return None

    async def _cache_set(self, key: str, value: str) -> None:
        try:
            await self.cache.set(key, value, self.cache_ttl)
        except CacheUnavailable as e:
            logger.warning("Cache write failed", metadata={"event": "cache_set_failed", "key": key}, error=e)

    async def _invalidate(self, product_id: str) -> None:
        key = cache_key(product_id)
        try:
            await self.cache.delete(key)
        except CacheUnavailable as e:
            logger.warning(
                "Cache invalidation failed",
                metadata={"event": "cache_invalidate_failed", "key": key},
                error=e,
            )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
