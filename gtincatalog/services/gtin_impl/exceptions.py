"""Exceptions raised by the GTIN value type."""

from gtincatalog.services.exceptions import ValidationError


class GTINError(ValidationError):
    """Base exception for GTIN parsing and classification errors."""

    pass


class GTINParseError(GTINError):
    """Raised when a string is not exactly 14 ASCII decimal digits."""

    pass


class GTINClassificationError(GTINError):
    """Raised when the digits do not match any GTIN-8/12/13/14 shape."""

    pass


class GTINInvariantError(AssertionError):
    """Raised when a classified GTIN resolves to a zero indicator digit.

    This signals a programming error in the classification rules, not bad
    input, so it sits outside the ServiceError hierarchy.
    """

    pass
