"""GTIN catalog services module.

This module provides the GTIN value type and the Brocade catalog client.
"""

from gtincatalog.services.exceptions import (
    APIError,
    ConfigurationError,
    DomainError,
    ExternalServiceError,
    ServiceError,
    ValidationError,
)

__all__ = [
    # Base exceptions
    "ServiceError",
    "ConfigurationError",
    "ExternalServiceError",
    "DomainError",
    # API exceptions
    "APIError",
    # Domain exceptions
    "ValidationError",
]
