"""
Trackit Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models for GeoJSON location features, and the MongoDB infrastructure
that stores them.
"""
