from .submit_location_beacon import SubmitLocationBeaconUseCase
from .get_device_history import GetDeviceHistoryUseCase
from .validation import BeaconValidationResult, validate_location_beacon

__all__ = [
    "SubmitLocationBeaconUseCase",
    "GetDeviceHistoryUseCase",
    "BeaconValidationResult",
    "validate_location_beacon",
]
