# Standard library imports
from typing import Any, List, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationBeaconRequest(BaseModel):
    """
    DTO for a location beacon submission
    
    Every field is optional here so that the use case can report all
    missing or out-of-range values in a single response.
    """
    caption: Optional[str] = None
    lat: Optional[float] = None
    long: Optional[float] = None
    
    @field_validator("lat", "long", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        # bool is an int subclass and lax float parsing would accept it
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value


class BeaconResultResponse(BaseModel):
    """DTO for a successful beacon submission"""
    result: str = "success"


class PointGeometryResponse(BaseModel):
    """DTO for a GeoJSON Point geometry"""
    type: str = "Point"
    coordinates: List[float]


class FeaturePropertiesResponse(BaseModel):
    """
    DTO for the public properties of a location feature
    
    Which properties reach the client is decided by FeatureDocumentSchema:
    undeclared properties pass through and hidden ones arrive already removed.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    
    caption: Optional[str] = None
    taken_at: Optional[str] = Field(default=None, alias="takenAt")


class FeatureResponse(BaseModel):
    """DTO for a GeoJSON Feature returned to clients"""
    type: str = "Feature"
    id: Optional[str] = None
    properties: FeaturePropertiesResponse
    geometry: PointGeometryResponse


class FeatureCollectionResponse(BaseModel):
    """DTO for a GeoJSON FeatureCollection"""
    type: str = "FeatureCollection"
    features: List[FeatureResponse] = Field(default_factory=list)
