# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import StorageError
from ...domain.repositories.feature_repository import FeatureRepository
from ...domain.models.feature import Feature, Point
from ...domain.constants import FeatureFields, GeoJSONTypes
from ...domain.schemas import FeatureDocumentSchema
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_feature_collection

logger = logging.getLogger(__name__)


class MongoFeatureRepository(FeatureRepository):
    """MongoDB implementation of FeatureRepository"""
    
    def __init__(
        self,
        schema: FeatureDocumentSchema,
        feature_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.schema = schema
        self.feature_collection = (
            feature_collection
            if feature_collection is not None
            else get_feature_collection(schema.collection_name)
        )
    
    async def insert(self, feature: Feature) -> Feature:
        """Insert a new feature document"""
        if not feature:
            raise ValueError("Feature cannot be None")
        
        document = self._feature_to_document(feature)
        try:
            result = await self.feature_collection.insert_one(document)
        except PyMongoError as e:
            raise StorageError(f"Error saving location: {str(e)}", cause=e)
        
        logger.info(f"Saved document {result.inserted_id} to '{self.schema.collection_name}'")
        return Feature(
            id=str(result.inserted_id),
            device_id=feature.device_id,
            caption=feature.caption,
            geometry=feature.geometry,
            taken_at=feature.taken_at,
        )
    
    async def find_by_device(self, hashed_device_id: str) -> List[Feature]:
        """Find all features for a hashed device ID, in natural order"""
        if not hashed_device_id:
            return []
        
        try:
            cursor = self.feature_collection.find(
                {FeatureFields.PROPERTIES_DEVICE_ID: hashed_device_id}
            )
            features = []
            async for document in cursor:
                try:
                    features.append(self._document_to_feature(document))
                except (ValueError, KeyError, TypeError) as e:
                    document_id = document.get(FeatureFields.MONGO_ID) if isinstance(document, dict) else None
                    raise StorageError(f"Invalid location document {document_id}: {str(e)}", cause=e)
            return features
        except PyMongoError as e:
            raise StorageError(f"Error listing locations: {str(e)}", cause=e)
    
    def _document_to_feature(self, document: Dict[str, Any]) -> Feature:
        """Convert MongoDB document to Feature domain model"""
        if not document:
            raise ValueError("Invalid document: document is None or empty")
        
        properties = document.get(FeatureFields.PROPERTIES) or {}
        geometry = document.get(FeatureFields.GEOMETRY) or {}
        
        return Feature(
            id=str(document[FeatureFields.MONGO_ID]) if FeatureFields.MONGO_ID in document else None,
            device_id=properties.get(FeatureFields.DEVICE_ID, ""),
            caption=properties.get(FeatureFields.CAPTION, ""),
            geometry=Point.from_coordinates(geometry.get(FeatureFields.COORDINATES) or []),
            taken_at=ensure_utc(properties.get(FeatureFields.TAKEN_AT)),
        )
    
    def _feature_to_document(self, feature: Feature) -> Dict[str, Any]:
        """Convert Feature domain model to MongoDB document"""
        return {
            FeatureFields.TYPE: GeoJSONTypes.FEATURE,
            FeatureFields.PROPERTIES: {
                FeatureFields.DEVICE_ID: feature.device_id,
                FeatureFields.CAPTION: feature.caption,
                FeatureFields.TAKEN_AT: feature.taken_at,
            },
            FeatureFields.GEOMETRY: {
                FeatureFields.TYPE: GeoJSONTypes.POINT,
                FeatureFields.COORDINATES: feature.geometry.coordinates,
            },
        }
