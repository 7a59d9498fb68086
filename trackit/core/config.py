# Standard library imports
import os
from typing import Final, List, Optional

# Local application imports
from .exceptions import ConfigurationError


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    Optional settings fall back to sensible defaults; the MongoDB connection
    string and the device hashing key have no default and are checked by
    validate() before the application starts serving requests.
    """
    
    def __init__(self) -> None:
        # Database Configuration
        self.mongo_url: Final[str] = os.getenv("MONGO_URL", "")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "trackit")
        self.feature_collection_name: Final[str] = os.getenv("TRACKIT_COLLECTION", "trackit")
        
        # Device identifier hashing
        self.device_key: Final[str] = os.getenv("DEVICE_KEY", "")
        
        # HTTP Configuration
        self.max_body_bytes: Final[int] = int(os.getenv("MAX_BODY_BYTES", "1000"))
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))
        
        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
    
    def validate(self) -> None:
        """
        Ensure all required settings are present
        
        Raises:
            ConfigurationError: If one or more required variables are missing
        """
        missing: List[str] = []
        if not self.mongo_url:
            missing.append("MONGO_URL")
        if not self.device_key:
            missing.append("DEVICE_KEY")
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}"
            )


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
