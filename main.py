"""
FastAPI Application - Product Catalog Service
"""

# Load environment variables from .env file FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.api import health, products
from catalog.cache.redis_cache import RedisCache
from catalog.core.config import config
from catalog.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
    rate_limit_handler,
    validation_exception_handler,
)
from catalog.core.logger import logger
from catalog.db.mongodb import close_mongo_connection, connect_to_mongo, get_product_collection
from catalog.messaging.notifier import EventNotifier
from catalog.messaging.rabbitmq_broker import RabbitMQBroker
from catalog.middleware import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    limiter,
)
from catalog.repositories.product import ProductRepository
from catalog.services.product import ProductService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the store, cache and broker, and wire them into the service"""
    logger.info("Starting Product Catalog Service...")

    await connect_to_mongo()

    cache = RedisCache(config.redis_url, timeout=config.cache_timeout)
    await cache.connect()

    broker = RabbitMQBroker(config.rabbitmq_uri, config.rabbitmq_exchange)
    await broker.connect()

    app.state.cache = cache
    app.state.broker = broker
    app.state.product_service = ProductService(
        store=ProductRepository(get_product_collection(), timeout=config.store_timeout),
        cache=cache,
        notifier=EventNotifier(broker),
        cache_ttl=config.cache_ttl_seconds,
    )

    logger.info(
        "Product Catalog Service started successfully",
        metadata={
            "service_name": config.service_name,
            "version": config.service_version,
            "environment": config.environment,
            "port": config.server_port,
        },
    )

    yield

    logger.info("Shutting down Product Catalog Service...")
    await broker.disconnect()
    await cache.close()
    await close_mongo_connection()


app = FastAPI(
    title="Product Catalog Service",
    description="Product catalog CRUD with read-through caching and domain events",
    version=config.service_version,
    lifespan=lifespan,
)

app.state.limiter = limiter

# Configure error handlers
app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

# Middleware: the last one added runs first
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=[config.request_id_header],
)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIdMiddleware)

# Include API routers
app.include_router(health.router, tags=["health"])
app.include_router(products.router, prefix=f"{config.api_prefix}/products", tags=["products"])


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {config.service_name} on port {config.server_port}")

    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.server_port,
        reload=config.environment == "development",
    )
