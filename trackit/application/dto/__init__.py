from .location_dto import (
    LocationBeaconRequest,
    BeaconResultResponse,
    PointGeometryResponse,
    FeaturePropertiesResponse,
    FeatureResponse,
    FeatureCollectionResponse,
)

__all__ = [
    "LocationBeaconRequest",
    "BeaconResultResponse",
    "PointGeometryResponse",
    "FeaturePropertiesResponse",
    "FeatureResponse",
    "FeatureCollectionResponse",
]
