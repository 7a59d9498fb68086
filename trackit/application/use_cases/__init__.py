from .location import (
    SubmitLocationBeaconUseCase,
    GetDeviceHistoryUseCase,
)

__all__ = [
    "SubmitLocationBeaconUseCase",
    "GetDeviceHistoryUseCase",
]
