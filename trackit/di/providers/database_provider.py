from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.schemas import FeatureDocumentSchema
from ...infrastructure.db.mongo_connection import (
    connect_to_mongo,
    get_feature_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database, the feature document schema and its collection.
        The Motor client behind them is created once and shared by all requests.
        """
        settings = get_settings()
        schema = FeatureDocumentSchema(collection_name=settings.feature_collection_name)
        
        container.register_singleton("database", connect_to_mongo())
        container.register_singleton(FeatureDocumentSchema, schema)
        container.register_singleton(
            "feature_collection",
            get_feature_collection(schema.collection_name),
        )
