from .mongo_connection import (
    connect_to_mongo,
    close_mongo_connection,
    get_database,
    get_feature_collection,
)
from .mongo_feature_repository import MongoFeatureRepository

__all__ = [
    "connect_to_mongo",
    "close_mongo_connection",
    "get_database",
    "get_feature_collection",
    "MongoFeatureRepository",
]
