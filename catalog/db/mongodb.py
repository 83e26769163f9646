"""
MongoDB database connection management
"""

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from catalog.core.config import config
from catalog.core.logger import logger


class Database:
    """Database connection manager"""

    client: Optional[AsyncIOMotorClient] = None
    database = None


db = Database()


async def connect_to_mongo():
    """Create database connection and verify it with a ping"""
    logger.info("Connecting to MongoDB...")

    try:
        db.client = AsyncIOMotorClient(
            config.mongodb_uri,
            tz_aware=True,
            serverSelectionTimeoutMS=int(config.store_timeout * 1000),
        )
        db.database = db.client[config.mongodb_database]

        await db.client.admin.command("ping")

        logger.info(
            f"Successfully connected to MongoDB database '{config.mongodb_database}'",
            metadata={"event": "mongodb_connected", "database": config.mongodb_database},
        )
    except Exception as e:
        logger.error(
            "Could not connect to MongoDB",
            metadata={"event": "mongodb_connection_error"},
            error=e,
        )
        raise


async def close_mongo_connection():
    """Close database connection"""
    logger.info("Closing connection to MongoDB...")
    if db.client is not None:
        db.client.close()
        db.client = None
        db.database = None


async def ping_mongo() -> bool:
    """Check whether the database answers a ping"""
    if db.client is None:
        return False
    await db.client.admin.command("ping")
    return True


def get_product_collection() -> AsyncIOMotorCollection:
    """Get products collection"""
    if db.database is None:
        raise RuntimeError("MongoDB is not connected. Call connect_to_mongo() first.")
    return db.database[config.mongodb_collection]
