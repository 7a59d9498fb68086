# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings
from ...core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def connect_to_mongo() -> AsyncIOMotorDatabase:
    """
    Create the process-wide MongoDB client (and its connection pool)
    
    Safe to call more than once; later calls return the existing database.
    The driver connects lazily, so an unreachable server surfaces on the
    first query rather than here.
    
    Returns:
        MongoDB database instance
        
    Raises:
        ConfigurationError: If MONGO_URL is not set
    """
    global _mongo_client, _mongo_database
    
    if _mongo_database is not None:
        return _mongo_database
    
    settings = get_settings()
    if not settings.mongo_url:
        raise ConfigurationError("MONGO_URL is not configured")
    
    _mongo_client = AsyncIOMotorClient(settings.mongo_url, tz_aware=True)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    logger.info(f"MongoDB client created for database '{settings.mongo_database_name}'")
    return _mongo_database


def close_mongo_connection() -> None:
    """Close the MongoDB client and release pooled connections"""
    global _mongo_client, _mongo_database
    
    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Returns:
        MongoDB database instance
    """
    return connect_to_mongo()


def get_feature_collection(collection_name: Optional[str] = None) -> AsyncIOMotorCollection:
    """
    Get the location features collection from MongoDB
    
    Args:
        collection_name: Override for the configured collection name
    
    Returns:
        MongoDB collection for GeoJSON features
    """
    name = collection_name or get_settings().feature_collection_name
    return get_database()[name]
