from .feature import Feature, Point

__all__ = ["Feature", "Point"]
