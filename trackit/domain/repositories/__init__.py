from .feature_repository import FeatureRepository

__all__ = ["FeatureRepository"]
