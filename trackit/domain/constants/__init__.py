"""Constants for domain model field names"""

from .feature_fields import FeatureFields, GeoJSONTypes

__all__ = [
    "FeatureFields",
    "GeoJSONTypes",
]
