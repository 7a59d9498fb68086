from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .location_provider import LocationProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "LocationProvider",
]
