"""
API layer for the Trackit backend.

Exposes the device location endpoints (beacon submission and history)
plus the middleware and exception handlers shared by every route.
"""
