# Standard library imports
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ...utils.datetime_utils import utc_now

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def is_valid_latitude(value: float) -> bool:
    return math.isfinite(value) and LATITUDE_RANGE[0] <= value <= LATITUDE_RANGE[1]


def is_valid_longitude(value: float) -> bool:
    return math.isfinite(value) and LONGITUDE_RANGE[0] <= value <= LONGITUDE_RANGE[1]


@dataclass(frozen=True)
class Point:
    """
    GeoJSON Point geometry.
    
    Coordinates follow GeoJSON order: longitude first, then latitude.
    """
    longitude: float
    latitude: float
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not is_valid_latitude(self.latitude):
            raise ValueError(f"Latitude {self.latitude} is outside [-90, 90]")
        if not is_valid_longitude(self.longitude):
            raise ValueError(f"Longitude {self.longitude} is outside [-180, 180]")
    
    @property
    def coordinates(self) -> List[float]:
        return [self.longitude, self.latitude]
    
    @classmethod
    def from_coordinates(cls, coordinates: List[float]) -> "Point":
        if len(coordinates) != 2:
            raise ValueError(f"Point requires exactly 2 coordinates, got {len(coordinates)}")
        return cls(longitude=float(coordinates[0]), latitude=float(coordinates[1]))


@dataclass(frozen=True)
class Feature:
    """
    Pure domain model for a location check-in.
    
    Stored as a GeoJSON Feature. device_id is always the hashed
    pseudonym, never the identifier the client sent. Features are
    immutable once created.
    """
    device_id: str
    caption: str
    geometry: Point
    taken_at: datetime = field(default_factory=utc_now)
    id: Optional[str] = None
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.device_id:
            raise ValueError("Device ID is required")
        if not self.caption or not self.caption.strip():
            raise ValueError("Caption is required")
