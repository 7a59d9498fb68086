from .config import Settings, get_settings
from .exceptions import (
    TrackitError,
    LocationValidationError,
    StorageError,
    ConfigurationError,
)
from .security import hash_device_id, DeviceIdHasher

__all__ = [
    "Settings",
    "get_settings",
    "TrackitError",
    "LocationValidationError",
    "StorageError",
    "ConfigurationError",
    "hash_device_id",
    "DeviceIdHasher",
]
