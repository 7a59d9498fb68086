from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...core.security import DeviceIdHasher
from ...domain.repositories.feature_repository import FeatureRepository
from ...domain.schemas import FeatureDocumentSchema
from ...application.use_cases.location.submit_location_beacon import SubmitLocationBeaconUseCase
from ...application.use_cases.location.get_device_history import GetDeviceHistoryUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class LocationProvider:
    """Location use case provider - registers beacon submission and history use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all location use cases.
        Use cases are created on-demand via factories.
        """
        # Fails fast when DEVICE_KEY is missing
        container.register_singleton(DeviceIdHasher, DeviceIdHasher(get_settings().device_key))
        
        container.register_factory(
            SubmitLocationBeaconUseCase,
            lambda: SubmitLocationBeaconUseCase(
                feature_repository=container.get(FeatureRepository),
                hash_device_id=container.get(DeviceIdHasher),
            )
        )
        
        container.register_factory(
            GetDeviceHistoryUseCase,
            lambda: GetDeviceHistoryUseCase(
                feature_repository=container.get(FeatureRepository),
                hash_device_id=container.get(DeviceIdHasher),
                schema=container.get(FeatureDocumentSchema),
            )
        )
