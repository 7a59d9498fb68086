# Standard library imports
import hashlib
import hmac

# Local application imports
from .exceptions import ConfigurationError


def hash_device_id(device_id: str, device_key: str) -> str:
    """
    Pseudonymize a device identifier with HMAC-SHA256
    
    The digest keeps identifiers a known, fixed length, hides the raw
    identifier from the database and keeps user input out of queries.
    
    Args:
        device_id: Raw device identifier taken from the request path
        device_key: Server-held secret key
        
    Returns:
        64-character lowercase hex digest
        
    Raises:
        ConfigurationError: If device_key is empty
    """
    if not device_key:
        raise ConfigurationError("DEVICE_KEY is not configured; refusing to hash device id")
    
    digest = hmac.new(
        device_key.encode("utf-8"),
        device_id.encode("utf-8"),
        hashlib.sha256,
    )
    return digest.hexdigest()


class DeviceIdHasher:
    """Callable that hashes device identifiers with a key bound at construction."""
    
    def __init__(self, device_key: str) -> None:
        if not device_key:
            raise ConfigurationError("DEVICE_KEY is not configured")
        self._device_key = device_key
    
    def __call__(self, device_id: str) -> str:
        return hash_device_id(device_id, self._device_key)
