# Standard library imports
import logging
from typing import Any, Callable, Dict

# Local application imports
from ....domain.repositories.feature_repository import FeatureRepository
from ....domain.models.feature import Feature
from ....domain.constants import FeatureFields, GeoJSONTypes
from ....domain.schemas import FeatureDocumentSchema
from ....utils.datetime_utils import to_iso
from ...dto.location_dto import FeatureCollectionResponse, FeatureResponse

logger = logging.getLogger(__name__)


def feature_to_geojson(feature: Feature) -> Dict[str, Any]:
    """Full GeoJSON representation of a feature, hidden fields included"""
    return {
        FeatureFields.TYPE: GeoJSONTypes.FEATURE,
        FeatureFields.ID: feature.id,
        FeatureFields.PROPERTIES: {
            FeatureFields.DEVICE_ID: feature.device_id,
            FeatureFields.CAPTION: feature.caption,
            FeatureFields.TAKEN_AT: to_iso(feature.taken_at),
        },
        FeatureFields.GEOMETRY: {
            FeatureFields.TYPE: GeoJSONTypes.POINT,
            FeatureFields.COORDINATES: feature.geometry.coordinates,
        },
    }


class GetDeviceHistoryUseCase:
    """Use case for listing every recorded location of a device"""
    
    def __init__(
        self,
        feature_repository: FeatureRepository,
        hash_device_id: Callable[[str], str],
        schema: FeatureDocumentSchema,
    ) -> None:
        self.feature_repository = feature_repository
        self.hash_device_id = hash_device_id
        self.schema = schema
    
    async def execute(self, device_id: str) -> FeatureCollectionResponse:
        """
        Get the location history of a device
        
        Args:
            device_id: Raw device identifier from the request path
            
        Returns:
            FeatureCollectionResponse; features is empty for unknown devices
            
        Raises:
            StorageError: If the query fails
        """
        hashed_device_id = self.hash_device_id(device_id)
        logger.debug(f"Converted deviceId to {hashed_device_id}")
        
        features = await self.feature_repository.find_by_device(hashed_device_id)
        logger.info(f"Found {len(features)} location(s) for device {hashed_device_id}")
        
        return FeatureCollectionResponse(
            type=GeoJSONTypes.FEATURE_COLLECTION,
            features=[
                FeatureResponse.model_validate(self.schema.strip_hidden(feature_to_geojson(feature)))
                for feature in features
            ],
        )
