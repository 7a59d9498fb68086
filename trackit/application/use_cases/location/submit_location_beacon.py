# Standard library imports
import logging
from typing import Callable

# Local application imports
from ....core.exceptions import LocationValidationError
from ....domain.repositories.feature_repository import FeatureRepository
from ....domain.models.feature import Feature, Point
from ....utils.datetime_utils import utc_now
from ...dto.location_dto import LocationBeaconRequest, BeaconResultResponse
from .validation import validate_location_beacon

logger = logging.getLogger(__name__)


class SubmitLocationBeaconUseCase:
    """Use case for recording a location beacon for a device"""
    
    def __init__(
        self,
        feature_repository: FeatureRepository,
        hash_device_id: Callable[[str], str],
    ) -> None:
        self.feature_repository = feature_repository
        self.hash_device_id = hash_device_id
    
    async def execute(
        self,
        device_id: str,
        request: LocationBeaconRequest,
    ) -> BeaconResultResponse:
        """
        Validate and store a location beacon
        
        Args:
            device_id: Raw device identifier from the request path
            request: Beacon body (caption, lat, long)
            
        Returns:
            BeaconResultResponse with result "success"
            
        Raises:
            LocationValidationError: If any field is missing or out of range
            StorageError: If the feature could not be saved
        """
        validation = validate_location_beacon(request)
        if not validation.is_valid:
            raise LocationValidationError(validation.errors)
        
        hashed_device_id = self.hash_device_id(device_id)
        logger.debug(f"Converted deviceId to {hashed_device_id}")
        
        feature = Feature(
            device_id=hashed_device_id,
            caption=request.caption,
            geometry=Point(longitude=request.long, latitude=request.lat),
            taken_at=utc_now(),
        )
        
        saved_feature = await self.feature_repository.insert(feature)
        logger.info(f"Saved location {saved_feature.id} for device {hashed_device_id}")
        
        return BeaconResultResponse(result="success")
