"""Shared test fixtures"""
from datetime import datetime, timedelta, timezone
from collections import Counter
from typing import Dict, List, Optional, Tuple
from unittest.mock import AsyncMock

import pytest
from bson import ObjectId

from catalog.cache.i_cache import ICache
from catalog.core.errors import CacheUnavailable, InvalidIdentifier, PublishUnavailable
from catalog.messaging.i_event_publisher import IEventPublisher
from catalog.messaging.notifier import EventNotifier
from catalog.models.product import Product, ProductFilter
from catalog.repositories.i_product_store import IProductStore
from catalog.schemas.product import ProductCreate, ProductUpdate
from catalog.services.product import ProductService


class InMemoryProductStore(IProductStore):
    """Dict-backed store that counts calls per operation"""

    def __init__(self):
        self.products: Dict[str, Product] = {}
        self.calls = Counter()

    def canonical_id(self, product_id: str) -> str:
        if not ObjectId.is_valid(product_id):
            raise InvalidIdentifier(product_id)
        return str(ObjectId(product_id))

    async def find_all(self, product_filter: ProductFilter) -> List[Product]:
        self.calls["find_all"] += 1
        products = list(self.products.values())
        return products[product_filter.offset:product_filter.offset + product_filter.limit]

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        self.calls["find_by_id"] += 1
        return self.products.get(self.canonical_id(product_id))

    async def create(self, product_data: ProductCreate) -> Product:
        self.calls["create"] += 1
        now = datetime.now(timezone.utc)
        product = Product(
            id=str(ObjectId()),
            created_at=now,
            updated_at=now,
            **product_data.model_dump(),
        )
        self.products[product.id] = product
        return product

    async def update(self, product_id: str, product_data: ProductUpdate) -> Optional[Product]:
        self.calls["update"] += 1
        product_id = self.canonical_id(product_id)
        current = self.products.get(product_id)
        if current is None:
            return None
        updated_at = max(datetime.now(timezone.utc), current.updated_at + timedelta(milliseconds=1))
        product = current.model_copy(update={**product_data.model_dump(), "updated_at": updated_at})
        self.products[product_id] = product
        return product

    async def delete(self, product_id: str) -> bool:
        self.calls["delete"] += 1
        return self.products.pop(self.canonical_id(product_id), None) is not None


class InMemoryCache(ICache):
    """Dict-backed cache; set `available = False` to simulate an outage"""

    def __init__(self):
        self.data: Dict[str, Tuple[str, int]] = {}
        self.calls = Counter()
        self.available = True

    def _check(self):
        if not self.available:
            raise CacheUnavailable("cache down")

    async def get(self, key: str) -> Optional[str]:
        self.calls["get"] += 1
        self._check()
        entry = self.data.get(key)
        return entry[0] if entry else None

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        self.calls["set"] += 1
        self._check()
        self.data[key] = (value, ttl_seconds)

    async def delete(self, key: str) -> None:
        self.calls["delete"] += 1
        self._check()
        self.data.pop(key, None)


class RecordingPublisher(IEventPublisher):
    """Captures published messages; set `available = False` to simulate a broker outage"""

    def __init__(self):
        self.messages: List[Tuple[str, bytes]] = []
        self.attempts = 0
        self.available = True

    async def publish(self, topic: str, payload: bytes) -> None:
        self.attempts += 1
        if not self.available:
            raise PublishUnavailable("broker down", details={"topic": topic})
        self.messages.append((topic, payload))


@pytest.fixture
def store():
    return InMemoryProductStore()


@pytest.fixture
def mock_store():
    """Spec'd store mock for scripting failures; identifiers pass through unchanged"""
    store = AsyncMock(spec=IProductStore)
    store.canonical_id.side_effect = lambda product_id: product_id
    return store


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def product_service(store, cache, publisher):
    """ProductService wired to in-memory collaborators"""
    return ProductService(store=store, cache=cache, notifier=EventNotifier(publisher))


@pytest.fixture
def widget():
    """Sample product submission"""
    return ProductCreate(name="Widget", price=9.99, sku="W-1", inventory=5, categories=["tools"])


@pytest.fixture
def product_id():
    """Well-formed identifier that no fixture creates"""
    return "507f1f77bcf86cd799439011"
