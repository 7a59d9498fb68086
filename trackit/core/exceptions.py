"""
Custom exception hierarchy for the Trackit backend.

Use cases and repositories raise these; API controllers translate them into
HTTP status codes. All of them inherit from TrackitError and carry a
client-facing message.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import List, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class TrackitError(Exception):
    """Base exception for all Trackit errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class LocationValidationError(TrackitError):
    """Raised when a location beacon fails one or more validation rules."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StorageError(TrackitError):
    """Raised when the document store cannot be reached or an operation fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------


class ConfigurationError(TrackitError):
    """Raised when required configuration (secrets, connection strings) is missing."""
    pass
