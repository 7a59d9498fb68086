from typing import TYPE_CHECKING
from ...domain.repositories.feature_repository import FeatureRepository
from ...domain.schemas import FeatureDocumentSchema
from ...infrastructure.db.mongo_feature_repository import MongoFeatureRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the collection and schema from the database provider.
        """
        container.register_singleton(
            FeatureRepository,
            MongoFeatureRepository(
                schema=container.get(FeatureDocumentSchema),
                feature_collection=container.get("feature_collection"),
            )
        )
