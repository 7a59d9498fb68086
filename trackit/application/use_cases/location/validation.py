# Standard library imports
from dataclasses import dataclass, field
from typing import List

# Local application imports
from ....domain.models.feature import is_valid_latitude, is_valid_longitude
from ...dto.location_dto import LocationBeaconRequest


@dataclass
class BeaconValidationResult:
    """Outcome of validating a beacon; empty errors means the beacon is valid"""
    errors: List[str] = field(default_factory=list)
    
    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_location_beacon(request: LocationBeaconRequest) -> BeaconValidationResult:
    """
    Check every beacon field independently and collect all failures
    
    Args:
        request: Parsed beacon body
        
    Returns:
        BeaconValidationResult listing each failed rule in field order
    """
    result = BeaconValidationResult()
    
    if request.caption is None or not request.caption.strip():
        result.errors.append('Missing required field "caption"')
    
    if request.lat is None:
        result.errors.append('Missing required field "lat"')
    elif not is_valid_latitude(request.lat):
        result.errors.append('"lat" value must be in the range (-90, 90)')
    
    if request.long is None:
        result.errors.append('Missing required field "long"')
    elif not is_valid_longitude(request.long):
        result.errors.append('"long" value must be in the range (-180, 180)')
    
    return result
