from .feature_schema import FeatureDocumentSchema

__all__ = ["FeatureDocumentSchema"]
