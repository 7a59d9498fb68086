from abc import ABC, abstractmethod
from typing import List
from ..models.feature import Feature


class FeatureRepository(ABC):
    """Repository interface - defines contract for location feature data access"""
    
    @abstractmethod
    async def insert(self, feature: Feature) -> Feature:
        """Persist a new feature and return it with its storage ID"""
        pass
    
    @abstractmethod
    async def find_by_device(self, hashed_device_id: str) -> List[Feature]:
        """Find all features recorded for a hashed device ID"""
        pass
