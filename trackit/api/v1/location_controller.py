# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.location_dto import LocationBeaconRequest, BeaconResultResponse
from ...application.use_cases.location.submit_location_beacon import SubmitLocationBeaconUseCase
from ...application.use_cases.location.get_device_history import GetDeviceHistoryUseCase
from ...core.exceptions import LocationValidationError, StorageError
from ...domain.constants import GeoJSONTypes
from ...di.container import get_container


router = APIRouter(tags=["devices"])


@router.post("/{device_id}/locations", response_model=BeaconResultResponse)
async def submit_location(
    device_id: str,
    request: Optional[LocationBeaconRequest] = None,
) -> BeaconResultResponse:
    """
    Add a new location beacon for a device
    
    Example body:
        {"caption": "Show this on the map", "lat": 32.7157, "long": -117.1611}
    
    Args:
        device_id: Raw device identifier; hashed before storage
        request: Beacon body; an empty body is reported as missing fields
        
    Returns:
        BeaconResultResponse with result "success"
    """
    container = get_container()
    submit_use_case = container.get(SubmitLocationBeaconUseCase)
    
    try:
        return await submit_use_case.execute(
            device_id=device_id,
            request=request or LocationBeaconRequest(),
        )
    except LocationValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )
    except StorageError as exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exception.message
        )


@router.get("/{device_id}/history")
async def get_device_history(device_id: str) -> JSONResponse:
    """
    Retrieve the location history of a device as a GeoJSON FeatureCollection
    
    Args:
        device_id: Raw device identifier; hashed before querying
        
    Returns:
        FeatureCollection served as application/vnd.geo+json
    """
    container = get_container()
    history_use_case = container.get(GetDeviceHistoryUseCase)
    
    try:
        collection = await history_use_case.execute(device_id=device_id)
    except StorageError as exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=exception.message
        )
    
    return JSONResponse(
        content=collection.model_dump(by_alias=True, exclude_none=True),
        media_type=GeoJSONTypes.MEDIA_TYPE,
    )
