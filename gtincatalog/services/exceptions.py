"""Standardized exception hierarchy for gtincatalog services.

Exception Hierarchy:
    ServiceError (base)
        ConfigurationError
        ExternalServiceError
            APIError
        DomainError
            ValidationError

Feature packages derive their own errors from these classes, e.g.
``GTINError`` from ``ValidationError`` and ``BrocadeError`` from ``APIError``.

Usage:
    from gtincatalog.services.exceptions import APIError, ServiceError

    try:
        client.get_product(gtin)
    except APIError:
        # Handle catalog failures
        pass
    except ServiceError:
        # Catch-all for any service-related error
        pass
"""

from typing import Any


class ServiceError(Exception):
    """Base exception for all service-related errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(ServiceError):
    """Raised when service configuration is missing or invalid."""

    pass


class ExternalServiceError(ServiceError):
    """Base exception for errors from external services/APIs."""

    pass


class APIError(ExternalServiceError):
    """Raised when an external API request fails.

    Attributes:
        status_code: Optional HTTP status code from the API response.
        response_body: Optional raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        """Return string representation including status code if available."""
        base_msg = self.message
        if self.status_code:
            base_msg = f"[HTTP {self.status_code}] {base_msg}"
        if self.details:
            base_msg = f"{base_msg} (details: {self.details})"
        return base_msg


class DomainError(ServiceError):
    """Base exception for domain/business logic errors."""

    pass


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    pass
